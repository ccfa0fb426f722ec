import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.responses import RedirectResponse
from starlette import status as status_codes

# --- Configuração e armazenamento ---
from oficina.config import settings
from oficina.exceptions import InactiveServiceError, InvalidReferenceError, NotFoundError
from oficina.logging_config import setup_logging
from oficina.store import OficinaStore
#----------------------------------------------------------

# --- Importação dos Roteadores ---
from oficina.routers.clients import router as clients_router
from oficina.routers.cars import router as cars_router
from oficina.routers.employees import router as employees_router
from oficina.routers.services import router as services_router
from oficina.routers.service_orders import router as service_orders_router
from oficina.routers.dashboard import router as dashboard_router
# ---------------------------------

logger = logging.getLogger(__name__)


def create_app(store: OficinaStore = None) -> FastAPI:
    """Cria a aplicação; sem ``store``, usa o banco configurado em ``settings``."""
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name)
    app.state.store = store or OficinaStore.from_url(settings.database_url).initialize()

    # Erros do domínio viram respostas HTTP (a apresentação mostra a mensagem)
    @app.exception_handler(NotFoundError)
    def not_found_handler(request: Request, exc: NotFoundError):
        logger.info("Não encontrado: %s", exc)
        return JSONResponse(status_code=status_codes.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    # Patch que deixaria o registro inválido (ex: apagar um campo obrigatório)
    @app.exception_handler(ValidationError)
    def validation_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.errors(include_url=False, include_context=False, include_input=False)},
        )

    @app.exception_handler(InactiveServiceError)
    def inactive_service_handler(request: Request, exc: InactiveServiceError):
        return JSONResponse(status_code=status_codes.HTTP_409_CONFLICT, content={"detail": str(exc)})

    # Cliente, veículo ou funcionário referenciado não existe (ou está inativo)
    @app.exception_handler(InvalidReferenceError)
    def invalid_reference_handler(request: Request, exc: InvalidReferenceError):
        logger.info("Referência inválida: %s", exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    # Inclui os roteadores (ordem não importa)
    app.include_router(clients_router)
    app.include_router(cars_router)
    app.include_router(employees_router)
    app.include_router(services_router)
    app.include_router(service_orders_router)
    app.include_router(dashboard_router)

    # Rota de redirecionamento para o painel
    @app.get("/", include_in_schema=False)
    def redirect_to_dashboard():
        return RedirectResponse(url="/dashboard/", status_code=status_codes.HTTP_302_FOUND)

    @app.get("/status")
    def status(request: Request):
        return {
            "status": "ok",
            "host": request.client.host if request.client else None,
            "port": request.url.port or 80,
            "scheme": request.url.scheme,
            "path": request.url.path,
        }

    return app


if __name__ == "__main__":
    uvicorn.run(create_app(), host="127.0.0.1", port=8000)
