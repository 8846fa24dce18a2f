"""
Magic Build — génération d'un bloc à partir d'un prompt libre.

Un adaptateur par SDK (openai, anthropic, gemini) ; un provider est actif dès que
sa clé API est présente dans l'environnement. La réponse attendue est un objet
JSON brut {type, content, styles}, validé ensuite par DocumentEditor.accept_candidate.
"""
import json
import logging
import os
from typing import Callable, Dict, List, Optional, Tuple

from .. import config
from ..blocks import BLOCK_TYPES, default_content
from ..exceptions import GenerationUnavailableError, MalformedResponseError

log = logging.getLogger(__name__)

# (prompt, system_instruction) → texte brut
Caller = Callable[[str, str], str]


def system_instruction() -> str:
    defaults = {t: default_content(t) for t in BLOCK_TYPES}
    return f"""You are an expert web designer assistant for a block-based website builder.
The user will ask you to create a website section.

You must select the most appropriate 'type' from this list: [{", ".join(BLOCK_TYPES)}].

You must return a JSON object with the following structure:
{{
  "type": "block_type_name",
  "content": {{ ...content_matching_default_structure_for_that_type... }},
  "styles": {{ ...optional_style_overrides_like_backgroundColor_textColor... }}
}}

Reference the following default content structures to ensure you use the correct keys for 'content':
{json.dumps(defaults)}

For 'styles', you can override 'backgroundColor', 'textColor', 'gradient', 'paddingTop', 'paddingBottom'.
If the user asks for "dark mode" or specific colors, apply them in 'styles'.

Do NOT wrap the response in markdown blocks. Return raw JSON only.
"""


# ── Adaptateurs IA ────────────────────────────────────────────────────

def _openai(prompt: str, system: str) -> str:
    import openai
    r = openai.OpenAI(api_key=os.getenv("OPENAI_API_KEY")).chat.completions.create(
        model=config.AI_MODEL or "gpt-4o-mini",
        messages=[{"role": "system", "content": system}, {"role": "user", "content": prompt}],
        temperature=config.AI_TEMPERATURE, max_tokens=config.AI_MAX_TOKENS,
        response_format={"type": "json_object"})
    return r.choices[0].message.content or ""

def _anthropic(prompt: str, system: str) -> str:
    import anthropic
    r = anthropic.Anthropic(api_key=os.getenv("ANTHROPIC_API_KEY")).messages.create(
        model=config.AI_MODEL or "claude-haiku-4-5-20251001",
        max_tokens=config.AI_MAX_TOKENS, temperature=config.AI_TEMPERATURE, system=system,
        messages=[{"role": "user", "content": prompt}])
    return r.content[0].text if r.content else ""

def _gemini(prompt: str, system: str) -> str:
    import google.generativeai as g
    g.configure(api_key=os.getenv("GEMINI_API_KEY"))
    r = g.GenerativeModel(config.AI_MODEL or "gemini-1.5-flash", system_instruction=system,
        generation_config={"temperature": config.AI_TEMPERATURE,
                           "max_output_tokens": config.AI_MAX_TOKENS,
                           "response_mime_type": "application/json"}).generate_content(prompt)
    return r.text or ""

_CALLERS: Dict[str, Tuple[Caller, str]] = {
    "openai":    (_openai,    "OPENAI_API_KEY"),
    "anthropic": (_anthropic, "ANTHROPIC_API_KEY"),
    "gemini":    (_gemini,    "GEMINI_API_KEY"),
}

def active_providers() -> List[str]:
    return [p for p, (_, k) in _CALLERS.items() if os.getenv(k)]


# ── Réponse ───────────────────────────────────────────────────────────

def parse_response(text: Optional[str]) -> dict:
    """
    Texte brut → objet candidat. Pas de nettoyage : une réponse entourée de
    balises markdown est considérée invalide.

    Raises:
        MalformedResponseError: vide, JSON invalide ou pas un objet
    """
    if not text or not text.strip():
        raise MalformedResponseError("Réponse IA vide")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"Réponse IA non JSON : {e.msg}") from e
    if not isinstance(data, dict):
        raise MalformedResponseError("Réponse IA : objet JSON attendu")
    return data


# ── Générateur ────────────────────────────────────────────────────────

class ContentGenerator:
    """
    Appel bloquant au provider configuré. `caller` injectable (tests, provider maison).

    Provider : ZENITH_AI_PROVIDER, sinon le premier provider dont la clé est définie.
    """

    def __init__(self, provider: Optional[str] = None, caller: Optional[Caller] = None):
        self.provider = provider
        self._caller = caller

    def _resolve(self) -> Tuple[str, Caller]:
        if self._caller is not None:
            return self.provider or "custom", self._caller
        provider = self.provider or config.AI_PROVIDER
        if not provider:
            active = active_providers()
            if not active:
                raise GenerationUnavailableError("Aucune clé API IA configurée")
            provider = active[0]
        if provider not in _CALLERS:
            raise GenerationUnavailableError(f"Provider IA inconnu : {provider!r}")
        caller, key = _CALLERS[provider]
        if not os.getenv(key):
            raise GenerationUnavailableError(f"{key} absent")
        return provider, caller

    def generate(self, prompt: str) -> dict:
        """
        Raises:
            GenerationUnavailableError: pas de provider, erreur SDK / réseau / authentification
            MalformedResponseError: réponse illisible
        """
        provider, caller = self._resolve()
        try:
            text = caller(prompt, system_instruction())
        except Exception as e:
            log.error(f"[{provider}] génération : {e}")
            raise GenerationUnavailableError(str(e)) from e
        return parse_response(text)
