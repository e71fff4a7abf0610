import os

# Acepta MAYÚSCULAS y camelCase (nombres de Bot Framework / Azure)
_ALIASES = {
    "MICROSOFT_APP_ID": "MicrosoftAppId",
    "MICROSOFT_APP_PASSWORD": "MicrosoftAppPassword",
    "MICROSOFT_APP_TENANT_ID": "MicrosoftAppTenantId",
    "MICROSOFT_APP_TYPE": "MicrosoftAppType",
}


def getenv(name: str, default: str = "") -> str:
    return os.getenv(name, os.getenv(_ALIASES.get(name, ""), default))


MICROSOFT_APP_ID        = getenv("MICROSOFT_APP_ID")
MICROSOFT_APP_PASSWORD  = getenv("MICROSOFT_APP_PASSWORD")
MICROSOFT_APP_TENANT_ID = getenv("MICROSOFT_APP_TENANT_ID")
MICROSOFT_APP_TYPE      = getenv("MICROSOFT_APP_TYPE", "MultiTenant")
AI_CONNECTION_STRING    = getenv("APPLICATIONINSIGHTS_CONNECTION_STRING")

DDRAGON_HOST    = getenv("DDRAGON_HOST", "ddragon.leagueoflegends.com")
DDRAGON_VERSION = getenv("DDRAGON_VERSION", "6.24.1")
DDRAGON_TIMEOUT = float(getenv("DDRAGON_TIMEOUT", "30"))

LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
PORT      = int(getenv("PORT", "3978"))


def ddragon_base_url(host: str = DDRAGON_HOST, version: str = DDRAGON_VERSION) -> str:
    return f"http://{host}/cdn/{version}/data/en_US/champion"


def bot_config() -> dict:
    """Configuración para ConfigurationBotFrameworkAuthentication."""
    return {
        "MicrosoftAppId": MICROSOFT_APP_ID,
        "MicrosoftAppPassword": MICROSOFT_APP_PASSWORD,
        "MicrosoftAppTenantId": MICROSOFT_APP_TENANT_ID,
        "MicrosoftAppType": MICROSOFT_APP_TYPE,
    }


def public_env_snapshot() -> dict:
    secrets = ["MICROSOFT_APP_PASSWORD", "APPLICATIONINSIGHTS_CONNECTION_STRING"]
    out = {k: "SET(***masked***)" if getenv(k) else "MISSING" for k in secrets}
    out["MICROSOFT_APP_ID"] = MICROSOFT_APP_ID or "MISSING"
    out["MICROSOFT_APP_TENANT_ID"] = MICROSOFT_APP_TENANT_ID or "(none)"
    out["MICROSOFT_APP_TYPE"] = MICROSOFT_APP_TYPE
    out["DDRAGON_BASE_URL"] = ddragon_base_url()
    out["DDRAGON_TIMEOUT"] = DDRAGON_TIMEOUT
    out["LOG_LEVEL"] = LOG_LEVEL
    return out
