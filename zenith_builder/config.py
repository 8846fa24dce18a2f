"""
Configuration Zenith Builder — variables d'environnement uniquement (aucun fichier).
"""
import os

# ── IA (Magic Build) ─────────────────────────────────────────────────────────
AI_PROVIDER    = os.getenv("ZENITH_AI_PROVIDER", "")  # vide → premier provider avec clé
AI_MODEL       = os.getenv("ZENITH_AI_MODEL", "")     # vide → modèle par défaut du provider
AI_TEMPERATURE = float(os.getenv("ZENITH_AI_TEMPERATURE", "0.7"))
AI_MAX_TOKENS  = int(os.getenv("ZENITH_AI_MAX_TOKENS", "2048"))

# ── Export ───────────────────────────────────────────────────────────────────
TAILWIND_CDN    = os.getenv("ZENITH_TAILWIND_CDN", "https://cdn.tailwindcss.com")
EXPORT_FILENAME = os.getenv("ZENITH_EXPORT_FILENAME", "zenith-page.html")

LOG_LEVEL = os.getenv("ZENITH_LOG_LEVEL", "INFO")
