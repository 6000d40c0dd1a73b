from contextlib import asynccontextmanager
import logging

from resumeai.core.session_store import LocalStore
from resumeai.gateway.client import AnalysisGateway
from resumeai.services.dashboard import Dashboard
from resumeai.services.session_shell import SessionShell

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    store = LocalStore()
    gateway = AnalysisGateway()
    app.state.shell = SessionShell(store)
    app.state.dashboard = Dashboard(gateway=gateway)
    logger.info("client_started authenticated=%s", app.state.shell.is_authenticated)

    yield

    await gateway.aclose()
    store.close()
