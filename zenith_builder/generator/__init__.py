"""
Générateur de contenu externe (Magic Build).
"""
from .ai import ContentGenerator, parse_response, system_instruction, active_providers
from .dialog import MagicBuildDialog, INVALID_RESPONSE_ALERT, GENERATION_FAILED_ALERT

__all__ = [
    "ContentGenerator", "parse_response", "system_instruction", "active_providers",
    "MagicBuildDialog", "INVALID_RESPONSE_ALERT", "GENERATION_FAILED_ALERT",
]
