# trustmona/web.py

import logging
from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from trustmona.analyzers.common import require_text
from trustmona.analyzers.feedback import submit_report
from trustmona.analyzers.text_analyzer import analyze_text
from trustmona.analyzers.url_analyzer import analyze_url
from trustmona.config import HOST, PORT, LOG_LEVEL
from trustmona.errors import InvalidRequest
from trustmona.providers.registry import Providers, build_providers
from trustmona.providers.reports import ReportStoreError

logger = logging.getLogger(__name__)

# route → 400 message when the body is not a usable JSON object
BAD_BODY_ERRORS = {
    "/scan": "URL required",
    "/scan-text": "Message text required",
    "/report": "URL and userVote are required",
}


def create_app(providers: Optional[Providers] = None) -> FastAPI:
    app = FastAPI(
        title="TrustMona Scan API",
        version="1.0.0",
        description="Scam scoring for links and messages",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.providers = providers or build_providers()

    @app.exception_handler(InvalidRequest)
    def invalid_request_handler(request: Request, exc: InvalidRequest):
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    def bad_body_handler(request: Request, exc: RequestValidationError):
        message = BAD_BODY_ERRORS.get(request.url.path, "Invalid request body")
        return JSONResponse(status_code=400, content={"error": message})

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    # ----------------------------------------------------
    # Scan Routes
    # ----------------------------------------------------

    @app.post("/scan")
    def scan_url(payload: Any = Body(None)):
        url = require_text(payload or {}, "url")
        return analyze_url(url, app.state.providers)

    @app.post("/scan-text")
    def scan_text(payload: Any = Body(None)):
        message = require_text(payload or {}, "message")
        return analyze_text(message, app.state.providers)

    # ----------------------------------------------------
    # Feedback Route
    # ----------------------------------------------------

    @app.post("/report")
    def report(payload: Any = Body(None)):
        try:
            data = submit_report(payload or {}, app.state.providers.reports)
        except ReportStoreError:
            logger.exception("failed to save report")
            return JSONResponse(status_code=500, content={"error": "Failed to save report"})

        return {"success": True, "report": data}

    return app


app = create_app()


def main():
    import uvicorn

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("TrustMona running on port %s", PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
