"""Example FastAPI application that reports its own access statistics.

Run with:
    uvicorn examples.fastapi_example:app --reload

Endpoints:
    /                  - Hello world, counted as an access
    /stats             - JSON summary of busiest and quietest periods
    /stats/histograms  - NDJSON counters for every histogram

Instrumentation:
    A middleware logs every request on the "example.access" logger and an
    AccessLogHandler turns those records into log entries.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from accesstally.adapters.logging import AccessLogHandler
from accesstally.core.analyzer import LogAnalyzer
from accesstally.core.encoding.ndjson import encode_histograms

access_logger = logging.getLogger("example.access")
access_logger.setLevel(logging.INFO)
handler = AccessLogHandler()
access_logger.addHandler(handler)

app = FastAPI(title="Access Statistics Example")


@app.middleware("http")
async def log_access(request: Request, call_next):
    response = await call_next(request)
    access_logger.info(
        '%s "%s %s" %d',
        request.client.host if request.client else "-",
        request.method,
        request.url.path,
        response.status_code,
    )
    return response


def _analyze() -> LogAnalyzer:
    analyzer = LogAnalyzer(handler.source)
    # The handler's source is shared, so rewind it before counting.
    analyzer.reset_source()
    analyzer.analyze_all_data()
    return analyzer


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": "Hello World"}


@app.get("/stats")
async def stats() -> dict[str, int]:
    return _analyze().summary()


@app.get("/stats/histograms", response_class=PlainTextResponse)
async def histograms() -> str:
    return encode_histograms(_analyze().histograms())
