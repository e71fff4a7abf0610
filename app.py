# app.py — Host del bot de lore con CloudAdapter (aiohttp) + Diagnóstico y App Insights
import logging
from aiohttp import web

from botbuilder.core import TurnContext, TelemetryLoggerMiddleware
from botbuilder.schema import Activity
from botbuilder.integration.aiohttp.cloud_adapter import CloudAdapter
from botbuilder.integration.aiohttp.configuration_bot_framework_authentication import (
    ConfigurationBotFrameworkAuthentication,
)

# Telemetría (Application Insights)
from botbuilder.applicationinsights import ApplicationInsightsTelemetryClient, bot_telemetry_processor

import msal

import settings
from bot import ChampionLoreBot
from presenters import apology_for


# ----------------------
# Logging básico
# ----------------------
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(levelname)s:%(name)s:%(message)s",
)
log = logging.getLogger("lore-bot.app")


# ==========================
# CloudAdapter + Auth
# ==========================
auth = ConfigurationBotFrameworkAuthentication(configuration=settings.bot_config())
adapter = CloudAdapter(auth)
bot = ChampionLoreBot()

# ==========
# Telemetría opcional a App Insights
# ==========
if settings.AI_CONNECTION_STRING:
    try:
        ai_client = ApplicationInsightsTelemetryClient(
            connection_string=settings.AI_CONNECTION_STRING, telemetry_processor=bot_telemetry_processor
        )
        # Loguea actividades entrantes/salientes sin PII
        adapter.use(TelemetryLoggerMiddleware(ai_client, log_personal_information=False))
        log.info("[AI] Application Insights habilitado")
    except Exception as e:
        log.warning("[AI] No se pudo inicializar App Insights: %s", e)


# ==========================
# Manejo global de errores
# ==========================
async def on_error(context: TurnContext, error: Exception):
    log.error("[BOT ERROR] %s", error, exc_info=error)
    try:
        await context.send_activity(apology_for(error))
    except Exception as e:
        log.error("[BOT ERROR][send_activity] %s", e, exc_info=True)

adapter.on_turn_error = on_error


# ==========
# Handlers
# ==========
async def messages(req: web.Request) -> web.Response:
    if "application/json" not in req.headers.get("Content-Type", ""):
        return web.Response(status=415, text="Content-Type must be application/json")

    body = await req.json()
    activity: Activity = Activity().deserialize(body)
    auth_header = req.headers.get("Authorization", "")

    log.debug("[DIAG] type=%s | channel=%s | serviceUrl=%s",
              activity.type, getattr(activity, "channel_id", ""), getattr(activity, "service_url", ""))

    # Orden CloudAdapter: (auth_header, activity, callback)
    response = await adapter.process_activity(auth_header, activity, bot.on_turn)
    if response:
        return web.json_response(data=response.body, status=response.status)
    return web.Response(status=201)


async def health(_: web.Request) -> web.Response:
    return web.json_response({"ok": True})


async def diag_env(_: web.Request) -> web.Response:
    return web.json_response(settings.public_env_snapshot())


# --- Diagnóstico de token MSAL (para validar secreto) ---
SCOPE = ["https://api.botframework.com/.default"]


def _authority() -> str:
    tenant = settings.MICROSOFT_APP_TENANT_ID
    if settings.MICROSOFT_APP_TYPE == "SingleTenant" and tenant:
        return f"https://login.microsoftonline.com/{tenant}"
    return "https://login.microsoftonline.com/botframework.com"


async def diag_msal(_: web.Request) -> web.Response:
    if not settings.MICROSOFT_APP_ID or not settings.MICROSOFT_APP_PASSWORD:
        return web.json_response({"ok": False, "error": "Faltan AppId/Secret"}, status=500)
    authority = _authority()
    log.info("Initializing with Entra authority: %s", authority)
    try:
        appc = msal.ConfidentialClientApplication(
            client_id=settings.MICROSOFT_APP_ID,
            client_credential=settings.MICROSOFT_APP_PASSWORD,
            authority=authority,
        )
        token = appc.acquire_token_for_client(scopes=SCOPE)
        ok = "access_token" in token
        payload = {"ok": ok, "authority": authority}
        if not ok:
            payload["error"] = token.get("error")
            payload["error_description"] = token.get("error_description")
        return web.json_response(payload, status=200 if ok else 500)
    except Exception as e:
        return web.json_response({"ok": False, "exception": str(e)}, status=500)


# ==========
# App AIOHTTP
# ==========
def create_app() -> web.Application:
    application = web.Application()
    application.router.add_post("/api/messages", messages)
    application.router.add_get("/health", health)
    application.router.add_get("/diag/env", diag_env)
    application.router.add_get("/diag/msal", diag_msal)
    return application


app = create_app()

if __name__ == "__main__":
    web.run_app(app, host="0.0.0.0", port=settings.PORT)
