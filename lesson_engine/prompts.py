"""
Instruction documents sent to the content provider.

The session instruction tells the provider where the lesson is in its
arc and what the learner has already typed; the outline instruction asks
for a one-line-per-session plan of the whole lesson.
"""

from typing import Optional, Sequence

from .arc import StageInstruction
from .models import LessonPlan, LessonTemplate

STYLE_CONTRACT = """
FORMATTING RULES:
- Use lowercase letters only
- Write exactly 5-6 sentences
- Each sentence has 8-15 words
- Put each sentence on its own line
- NO punctuation except a period at the end of each sentence
- Child-friendly vocabulary, clear and literal
- No commentary, no labels, no numbering
""".strip()

NO_REPEAT_RULES = """
CRITICAL RULES - DO NOT REPEAT:
- Do not reuse the same words or phrases from previous parts
- Do not repeat sentence structures or start sentences the same way
- Move forward with new events, new details or new discoveries
- Build on what happened before, don't retell it
""".strip()

TYPE_GUIDANCE = {
    "story": "Build a progressive story with character introduction, setting, adventure, challenges, and resolution",
    "education": "Teach factual information progressively, starting with basics and building to more details",
    "creative": "Encourage imagination and creativity, building on their ideas each session",
    "adventure": "Create an exciting journey with discoveries and learning at each step",
}


def type_guidance(lesson_type: str) -> str:
    return TYPE_GUIDANCE.get(lesson_type, "Create engaging, progressive content")


def build_session_instruction(
    plan: LessonPlan,
    session_number: int,
    stage: StageInstruction,
    action: str,
    previous_content: Optional[str] = None,
) -> str:
    """Assemble the full instruction document for one session."""
    topic = plan.title.upper()
    age = plan.learner_age if plan.learner_age is not None else 8

    parts = [
        f"You are writing typing practice for a {age}-year-old child with autism.",
        f"TOPIC: {topic}\nEvery sentence MUST be about {topic}.",
        f"Session {session_number} of {plan.total_sessions}",
    ]
    if previous_content:
        parts.append(f"THE STORY SO FAR:\n{previous_content.strip()}")
        parts.append(NO_REPEAT_RULES)
    else:
        parts.append("This is the BEGINNING of the lesson.")

    parts.append(f"STRUCTURE FOR SESSION {session_number}:\n{stage.render()}")
    parts.append(f"WHAT SHOULD HAPPEN NOW:\n{action}")
    if plan.interests:
        parts.append(f"The child is interested in: {', '.join(plan.interests)}. Weave one in if it fits.")
    parts.append(STYLE_CONTRACT)
    parts.append(f"Provide ONLY the new sentences about {topic}, one per line.")
    return "\n\n".join(parts)


def build_outline_instruction(
    template: LessonTemplate,
    learner_age: int,
    interests: Sequence[str] = (),
) -> str:
    """Ask for a short outline of the whole lesson, one line per session."""
    sessions = template.suggested_sessions
    lines = [
        f"Create a {sessions}-session typing lesson plan for a {learner_age}-year-old child with autism.",
        "",
        f"Theme: {template.title}",
        f"Description: {template.description}",
        f"Type: {template.lesson_type}",
    ]
    if interests:
        lines.append(f"The child is interested in: {', '.join(interests)}")
    lines.extend([
        "",
        "Create a structured lesson plan where each session:",
        "1. Builds on the previous session",
        "2. Teaches something educational",
        "3. Uses simple, clear language (autism-friendly)",
        "4. Has easy-to-type content (lowercase, short sentences)",
        "5. Is encouraging and positive",
        "",
        f'For a "{template.lesson_type}" lesson:',
        type_guidance(template.lesson_type),
        "",
        f"Format: List sessions 1-{sessions} with a one-line description of each.",
    ])
    return "\n".join(lines)
