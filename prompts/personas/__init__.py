"""
Persona definitions.

Each persona is a string that defines the AI's personality and behavior.
It gets slotted into the system frame as the {persona} variable.

Usage:
    from prompts.personas import get_persona
    system_prompt = SYSTEM_FRAME.format(persona=get_persona("friend"))
"""

from typing import Dict

from prompts.personas.friend import FRIEND_PERSONA

PERSONAS: Dict[str, str] = {
    "friend": FRIEND_PERSONA,
}


def get_persona(name: str) -> str:
    """Look up a persona by name. Raises ValueError for unknown names."""
    try:
        return PERSONAS[name]
    except KeyError:
        raise ValueError(f"Unknown persona: {name}") from None


__all__ = [
    "FRIEND_PERSONA",
    "PERSONAS",
    "get_persona",
]
