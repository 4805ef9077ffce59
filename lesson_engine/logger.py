"""
Centralized logging configuration for the lesson engine.

Provides consistent, color-coded debug output for:
- Environment/configuration status
- Content provider calls and responses
- Lesson plan creation
- Session generation and fallbacks
- Warnings

Usage:
    from lesson_engine.logger import logger

    logger.api("Calling content provider...")
    logger.plan("Created plan for 'Animal Adventures'")
    logger.fallback("Provider failed, using fallback content")
"""

import os
import sys
import time
import traceback
from datetime import datetime
from typing import Optional

# The status glyphs (✓ ✗ ⚠ ↺) need UTF-8 streams
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8")


class ColorCodes:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    # Colors
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"

    # Bright colors
    BRIGHT_RED = "\033[91m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_CYAN = "\033[96m"


class DebugLogger:
    """
    Custom debug logger with categorized, color-coded output.

    Categories:
    - ENV: Environment/configuration (dotenv, API keys)
    - API: Content provider calls
    - PLAN: Lesson plan creation and outlines
    - SESS: Session generation
    - FALL: Fallback content substitution
    - WARN: Warnings
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._start_time = datetime.now()

    def _timestamp(self) -> str:
        """Get formatted timestamp with elapsed time."""
        now = datetime.now()
        elapsed = (now - self._start_time).total_seconds()
        return f"{now.strftime('%H:%M:%S')}.{now.microsecond // 1000:03d} (+{elapsed:>6.1f}s)"

    def _log(self, category: str, color: str, message: str, **kwargs) -> None:
        """Internal logging method."""
        if not self.enabled:
            return

        timestamp = self._timestamp()
        prefix = f"{ColorCodes.DIM}{timestamp}{ColorCodes.RESET}"
        tag = f"{color}{ColorCodes.BOLD}[{category:>4}]{ColorCodes.RESET}"
        padding = " " * (len(timestamp) + 8)

        # Indent continuation lines so multi-line prompts stay readable
        for i, line in enumerate(message.split("\n")):
            if i == 0:
                print(f"{prefix} {tag} {line}", file=sys.stdout, flush=True)
            else:
                print(f"{ColorCodes.DIM}{padding}{ColorCodes.RESET}{line}", file=sys.stdout, flush=True)

        if kwargs.get("exc_info"):
            for line in traceback.format_exc().split("\n"):
                if line.strip():
                    print(f"{ColorCodes.DIM}{padding}{ColorCodes.RED}{line}{ColorCodes.RESET}",
                          file=sys.stderr, flush=True)

    # === Environment/Configuration ===
    def env(self, message: str, **kwargs) -> None:
        """Log environment/configuration messages (dotenv, API keys, etc.)."""
        self._log("ENV", ColorCodes.MAGENTA, message, **kwargs)

    def env_success(self, message: str, **kwargs) -> None:
        self._log("ENV", ColorCodes.GREEN, f"✓ {message}", **kwargs)

    def env_error(self, message: str, **kwargs) -> None:
        self._log("ENV", ColorCodes.RED, f"✗ {message}", **kwargs)

    # === Content provider calls ===
    def api(self, message: str, **kwargs) -> None:
        """Log provider-related messages."""
        self._log("API", ColorCodes.CYAN, message, **kwargs)

    def api_call(self, endpoint: str, model: Optional[str] = None, **kwargs) -> None:
        """Log a provider call being made."""
        model_info = f" (model: {model})" if model else ""
        self._log("API", ColorCodes.CYAN, f"→ Calling {endpoint}{model_info}", **kwargs)

    def api_response(self, endpoint: str, duration_ms: Optional[float] = None, **kwargs) -> None:
        """Log a provider response received."""
        duration_info = f" ({duration_ms:.0f}ms)" if duration_ms else ""
        self._log("API", ColorCodes.BRIGHT_CYAN, f"← Response from {endpoint}{duration_info}", **kwargs)

    def api_error(self, message: str, **kwargs) -> None:
        self._log("API", ColorCodes.BRIGHT_RED, f"✗ {message}", **kwargs)

    # === Lesson plans ===
    def plan(self, message: str, **kwargs) -> None:
        """Log lesson plan creation and outline messages."""
        self._log("PLAN", ColorCodes.BLUE, message, **kwargs)

    # === Sessions ===
    def session(self, message: str, **kwargs) -> None:
        """Log session generation messages."""
        self._log("SESS", ColorCodes.BRIGHT_BLUE, message, **kwargs)

    def fallback(self, message: str, **kwargs) -> None:
        """Log substitution of deterministic fallback content."""
        self._log("FALL", ColorCodes.YELLOW, f"↺ {message}", **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log("WARN", ColorCodes.BRIGHT_YELLOW, f"⚠ {message}", **kwargs)


# Global logger instance
logger = DebugLogger(enabled=os.getenv("LESSON_ENGINE_DEBUG", "1").strip().lower() not in ("0", "false", "no", "off"))


class Timer:
    """Context manager for timing operations."""

    def __init__(self):
        self.start_time: Optional[float] = None
        self.duration_ms: float = 0

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        if self.start_time:
            self.duration_ms = (time.perf_counter() - self.start_time) * 1000
