import logging
import os
import signal
import threading
from fastapi import BackgroundTasks, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from turfzone import config
from turfzone.config import CORS_ORIGINS, PORT, HOST, DEBUG
from turfzone.confirmation import ConfirmationGenerator
from turfzone.constants import (
    DEFAULT_CATEGORY, BOOKING_TURF_OPTIONS, TIME_SLOT_OPTIONS, DEFAULT_BOOKING_DATE
)
from turfzone.controller import ApplicationExited, InvalidTransition, ViewController
from turfzone.logging_config import setup_logging
from turfzone.models import BookNowRequest, CategorySelect, ConfirmBody, Turf
from turfzone.notices import NoticeBoard
from turfzone.repository import PostgresTurfRepository, TurfRepository
from turfzone.session import Session
from turfzone.views import ActionResponse

logger = logging.getLogger(__name__)

app = FastAPI(
    title="TurfZone API",
    version="1.0.0",
    docs_url="/api/docs" if DEBUG else None,
    redoc_url="/api/redoc" if DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Actions mutate one shared controller; run them one at a time
_controller_lock = threading.Lock()


def _error(request: Request, status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": True, "status_code": status_code, "message": message, "path": str(request.url.path)}
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return _error(request, exc.status_code, exc.detail)


@app.exception_handler(ApplicationExited)
async def exited_handler(request: Request, exc: ApplicationExited):
    return _error(request, 410, str(exc))


@app.exception_handler(InvalidTransition)
async def transition_handler(request: Request, exc: InvalidTransition):
    return _error(request, 409, str(exc))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return _error(request, 500, "Internal server error")


def build_controller() -> ViewController:
    notices = NoticeBoard()
    return ViewController(
        repository=PostgresTurfRepository(notices=notices),
        session=Session(),
        generator=ConfirmationGenerator(),
        notices=notices,
    )


@app.on_event("startup")
def startup():
    setup_logging()
    controller = build_controller()
    controller.start()
    app.state.controller = controller


def get_controller(request: Request) -> ViewController:
    return request.app.state.controller


def get_lookup_repository() -> TurfRepository:
    # No notice board: plain lookups must not leak notices into the view flow
    return PostgresTurfRepository()


def _respond(controller: ViewController) -> ActionResponse:
    return ActionResponse(state=controller.snapshot(), notices=controller.notices.drain())


def _stop_process():
    logger.info("Stopping server after logout")
    os.kill(os.getpid(), signal.SIGINT)


# ============ VIEW STATE ============

@app.get("/api/state", response_model=ActionResponse)
def get_state(controller: ViewController = Depends(get_controller)):
    with _controller_lock:
        return _respond(controller)


# ============ TURFS ============

@app.get("/api/turfs", response_model=list[Turf])
def list_turfs(category: str = DEFAULT_CATEGORY, repository: TurfRepository = Depends(get_lookup_repository)):
    return repository.list_turfs_by_category(category)


@app.post("/api/home/category", response_model=ActionResponse)
def select_category(body: CategorySelect, controller: ViewController = Depends(get_controller)):
    with _controller_lock:
        controller.select_category(body.category)
        return _respond(controller)


# ============ BOOKING ============

@app.post("/api/book-now", response_model=ActionResponse)
def book_now(body: BookNowRequest, controller: ViewController = Depends(get_controller)):
    with _controller_lock:
        controller.book_now(body.turf_name)
        return _respond(controller)


@app.post("/api/booking/cancel", response_model=ActionResponse)
def cancel_booking(controller: ViewController = Depends(get_controller)):
    with _controller_lock:
        controller.cancel()
        return _respond(controller)


@app.post("/api/booking/confirm", response_model=ActionResponse)
def confirm_booking(body: ConfirmBody, controller: ViewController = Depends(get_controller)):
    with _controller_lock:
        controller.confirm(body.turf_name, body.date, body.time_slot)
        return _respond(controller)


@app.post("/api/booking/acknowledge", response_model=ActionResponse)
def acknowledge_booking(controller: ViewController = Depends(get_controller)):
    with _controller_lock:
        controller.acknowledge()
        return _respond(controller)


# ============ SESSION ============

@app.get("/api/session")
def get_session(controller: ViewController = Depends(get_controller)):
    return {"logged_in": controller.session.is_logged_in()}


@app.post("/api/session/login")
def login(controller: ViewController = Depends(get_controller)):
    with _controller_lock:
        if controller.exited:
            raise ApplicationExited("Application has exited")
        controller.session.login()
        return {"logged_in": controller.session.is_logged_in()}


@app.post("/api/logout", response_model=ActionResponse)
def logout(background_tasks: BackgroundTasks, controller: ViewController = Depends(get_controller)):
    with _controller_lock:
        controller.logout()
        if config.EXIT_ON_LOGOUT:
            background_tasks.add_task(_stop_process)
        return _respond(controller)


# ============ CONFIGURATION ============

@app.get("/api/config")
def get_config():
    return {
        "default_category": DEFAULT_CATEGORY,
        "turf_options": BOOKING_TURF_OPTIONS,
        "time_slots": TIME_SLOT_OPTIONS,
        "default_date": DEFAULT_BOOKING_DATE,
    }


# ============ HEALTH CHECK ============

@app.get("/api/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("turfzone.main:app", host=HOST, port=PORT, reload=DEBUG)
