"""
FastAPI entry point for the Runnr data API.

This module is the Composition Root for the server: it wires the
infrastructure adapters to the application use-cases and exposes them over
HTTP. Each use-case is provided through a dependency function so tests can
swap it with ``app.dependency_overrides``.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from src.application.use_cases.authenticate import AuthenticateUseCase
from src.application.use_cases.get_chart_series import SYMBOL_FORMAT_HINT, GetChartSeriesUseCase
from src.application.use_cases.get_quote import GetQuoteUseCase
from src.application.use_cases.get_scanner_payload import GetScannerPayloadUseCase
from src.application.use_cases.search_symbols import SearchSymbolsUseCase
from src.domain.entities.app_state import DEFAULT_SYMBOL, User
from src.domain.entities.market_data import DEFAULT_TIMEFRAME, TIMEFRAMES
from src.domain.errors import ConfigurationError, UpstreamError, ValidationError
from src.domain.ports.chat_responder_port import IChatResponder
from src.domain.ports.token_validator_port import ITokenValidator
from src.infrastructure.auth.supabase_identity_provider import SupabaseIdentityProvider
from src.infrastructure.auth.supabase_token_validator import SupabaseTokenValidator
from src.infrastructure.chat.keyword_chat_responder import KeywordChatResponder
from src.infrastructure.config.settings import Settings
from src.infrastructure.entrypoints.schemas import (
    AuthRequest,
    ChartDataOut,
    ChatRequest,
    QuoteOut,
    ScannerPayloadOut,
    SearchResultOut,
    dump,
)
from src.infrastructure.market_data.twelve_data_adapter import TwelveDataMarketDataProvider
from src.infrastructure.scanner.supabase_scanner_source import SupabaseScannerDataSource

# ---------------------------------------------------------------------------
# Composition Root: wire all dependencies once at startup
# ---------------------------------------------------------------------------
_settings = Settings.from_env()

logging.basicConfig(
    level=_settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

_market_data = TwelveDataMarketDataProvider(
    api_key=_settings.twelve_data_api_key,
    base_url=_settings.twelve_data_base_url,
)
_scanner_source = SupabaseScannerDataSource(
    url=_settings.supabase_url,
    service_role_key=_settings.supabase_service_role_key,
)
_identity_provider = SupabaseIdentityProvider(
    url=_settings.supabase_url,
    anon_key=_settings.supabase_anon_key,
)

_chart_use_case = GetChartSeriesUseCase(_market_data)
_quote_use_case = GetQuoteUseCase(_market_data)
_search_use_case = SearchSymbolsUseCase(_market_data)
_scanner_use_case = GetScannerPayloadUseCase(_scanner_source)
_auth_use_case = AuthenticateUseCase(_identity_provider)
_validator = SupabaseTokenValidator(_settings.supabase_jwt_secret)
_chat_responder = KeywordChatResponder()


def get_chart_use_case() -> GetChartSeriesUseCase:
    return _chart_use_case


def get_quote_use_case() -> GetQuoteUseCase:
    return _quote_use_case


def get_search_use_case() -> SearchSymbolsUseCase:
    return _search_use_case


def get_scanner_use_case() -> GetScannerPayloadUseCase:
    return _scanner_use_case


def get_auth_use_case() -> AuthenticateUseCase:
    return _auth_use_case


def get_token_validator() -> ITokenValidator:
    return _validator


def get_chat_responder() -> IChatResponder:
    return _chat_responder


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(title="Runnr Market Data API")


@app.exception_handler(ValidationError)
async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    body: dict = {"error": str(exc)}
    if exc.valid:
        body["valid"] = exc.valid
    return JSONResponse(status_code=400, content=body)


@app.exception_handler(ConfigurationError)
async def _configuration_error(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error("Configuration error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.exception_handler(UpstreamError)
async def _upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
    logger.warning("Upstream error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=502, content={"error": str(exc)})


def _bad_request(message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message, **extra})


@app.get("/api/chart")
async def chart(
    symbol: Optional[str] = None,
    timeframe: str = DEFAULT_TIMEFRAME,
    action: Optional[str] = None,
    q: Optional[str] = None,
    chart_uc: GetChartSeriesUseCase = Depends(get_chart_use_case),
    quote_uc: GetQuoteUseCase = Depends(get_quote_use_case),
    search_uc: SearchSymbolsUseCase = Depends(get_search_use_case),
):
    """Chart series by default; ``action=quote`` or ``action=search`` for the other lookups."""
    if action == "search":
        if not q:
            return _bad_request("Search query required")
        results = await search_uc.execute(q)
        return {"success": True, "results": [dump(SearchResultOut, r) for r in results]}

    if action == "quote":
        if not symbol:
            return _bad_request("Symbol required")
        quote = await quote_uc.execute(symbol)
        return {"success": True, "quote": dump(QuoteOut, quote)}

    if not symbol:
        return _bad_request("Symbol required", example="/api/chart?symbol=AAPL&timeframe=daily")

    try:
        data = await chart_uc.execute(symbol, timeframe)
    except ValidationError as exc:
        if exc.valid:
            return _bad_request("Invalid timeframe", valid=exc.valid)
        return _bad_request("Invalid symbol format", format=SYMBOL_FORMAT_HINT)
    return {"success": True, **dump(ChartDataOut, data)}


@app.options("/api/chart")
async def chart_options():
    return {
        "timeframes": list(TIMEFRAMES),
        "endpoints": {
            "chartData": "GET /api/chart?symbol=AAPL&timeframe=daily",
            "quote": "GET /api/chart?action=quote&symbol=AAPL",
            "search": "GET /api/chart?action=search&q=apple",
        },
    }


@app.get("/api/scanner")
async def scanner(scanner_uc: GetScannerPayloadUseCase = Depends(get_scanner_use_case)):
    return dump(ScannerPayloadOut, await scanner_uc.execute())


def _bearer_token(request: Request) -> Optional[str]:
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        return None
    return auth_header.split(" ", 1)[1]


@app.post("/api/auth")
async def auth(
    body: AuthRequest,
    request: Request,
    auth_uc: AuthenticateUseCase = Depends(get_auth_use_case),
):
    """Forward signup / signin / signout to the identity provider."""
    try:
        return await auth_uc.execute(
            body.action,
            email=body.email,
            password=body.password,
            access_token=_bearer_token(request),
        )
    except UpstreamError as exc:
        logger.warning("Auth error: %s", exc)
        return JSONResponse(status_code=401, content={"error": str(exc)})


async def get_current_user(
    request: Request,
    validator: ITokenValidator = Depends(get_token_validator),
) -> User:
    """FastAPI dependency: validate the Supabase JWT from the Authorization header."""
    token = _bearer_token(request)
    if token is None:
        raise HTTPException(status_code=401, detail="Missing or invalid Authorization header.")
    try:
        return validator.validate(token)
    except ValueError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc


@app.get("/api/auth/user")
async def current_user(user: User = Depends(get_current_user)):
    return {"id": user.id, "email": user.email}


@app.post("/api/chat")
async def chat(
    body: ChatRequest,
    responder: IChatResponder = Depends(get_chat_responder),
):
    if not body.message.strip():
        return _bad_request("Message required")
    reply = await responder.reply(body.message, (body.symbol or DEFAULT_SYMBOL).upper())
    return {"reply": reply}


@app.get("/health")
async def health():
    return {"status": "ok"}
