from __future__ import annotations
import logging
import uuid
from typing import Optional

import socketio
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .config import Config
from .dictionary import DictionaryService, build_dictionary
from .errors import ConfigurationError, SessionNotFound
from .managers.rounds import RoundManager
from .routers import ws
from .schemas import SessionCreated, RoundView, SubmitRequest, SubmitResponse, WordValidation
from .word_list import FileWordListProvider, WordListProvider

logger = logging.getLogger(__name__)

api = APIRouter()

def get_rounds(request: Request) -> RoundManager:
    return request.app.state.rounds

def create_app(config_class=Config, words: Optional[WordListProvider] = None,
               dictionary: Optional[DictionaryService] = None) -> FastAPI:
    logging.basicConfig(level=getattr(config_class, 'LOG_LEVEL', 'INFO'))

    words = words or FileWordListProvider(config_class.WORD_LIST_PATH)
    dictionary = dictionary or build_dictionary(config_class)
    locale = getattr(config_class, 'DICTIONARY_LOCALE', 'en')

    origins = getattr(config_class, 'CORS_ORIGINS', ['*'])

    fastapi_app = FastAPI(title="Word Scramble", version="0.1.0")
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    fastapi_app.state.config = config_class
    fastapi_app.state.dictionary = dictionary
    fastapi_app.state.locale = locale
    fastapi_app.state.rounds = rounds = RoundManager(words, dictionary, locale=locale)

    # Socket.IO server (ASGI), one per app so it shares the REST round manager
    sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins='*' if '*' in origins else origins)
    register_socketio_handlers(sio, rounds)
    fastapi_app.state.sio = sio

    fastapi_app.add_exception_handler(ConfigurationError, _configuration_error)
    fastapi_app.add_exception_handler(SessionNotFound, _session_not_found)

    fastapi_app.include_router(api)
    fastapi_app.include_router(ws.router, prefix='/ws')
    return fastapi_app

async def _configuration_error(request: Request, exc: ConfigurationError):
    logger.error(f"[config-error] {exc}")
    return JSONResponse(status_code=503, content={ 'ok': False, 'error': str(exc) })

async def _session_not_found(request: Request, exc: SessionNotFound):
    return JSONResponse(status_code=404, content={ 'ok': False, 'error': str(exc) })

# REST Endpoints
@api.get('/health')
async def health(manager: RoundManager = Depends(get_rounds)):
    return { 'status': 'ok', 'sessions': len(manager.rounds) }

@api.post('/sessions', status_code=201)
async def create_session(manager: RoundManager = Depends(get_rounds)) -> SessionCreated:
    session_id = uuid.uuid4().hex
    view = manager.create(session_id)
    return SessionCreated(sessionId=session_id, round=view)

@api.get('/sessions/{session_id}')
async def get_session(session_id: str, manager: RoundManager = Depends(get_rounds)) -> RoundView:
    return manager.get(session_id)

# "New word" button
@api.post('/sessions/{session_id}/round')
async def new_round(session_id: str, manager: RoundManager = Depends(get_rounds)) -> RoundView:
    return manager.new_round(session_id)

@api.post('/sessions/{session_id}/words')
async def submit_word(session_id: str, body: SubmitRequest, manager: RoundManager = Depends(get_rounds)) -> SubmitResponse:
    return manager.submit(session_id, body.word)

@api.delete('/sessions/{session_id}')
async def delete_session(session_id: str, manager: RoundManager = Depends(get_rounds)):
    manager.discard(session_id)
    return { 'ok': True }

# Dictionary validation REST endpoint
@api.get('/dict/validate')
async def validate_word(request: Request, word: str, locale: Optional[str] = None) -> WordValidation:
    locale = locale or request.app.state.locale
    valid = request.app.state.dictionary.is_valid_word(word.strip().lower(), locale)
    return WordValidation(word=word.strip().lower(), locale=locale, valid=valid)

# Socket.IO Events
def register_socketio_handlers(sio: socketio.AsyncServer, rounds: RoundManager) -> None:
    @sio.event
    async def connect(sid, environ, auth=None):
        # A screen starts its first round as soon as it appears
        try:
            view = rounds.create(sid)
        except ConfigurationError as exc:
            logger.error(f"[config-error] sid={sid} {exc}")
            raise socketio.exceptions.ConnectionRefusedError(str(exc))
        await sio.emit('round:state', view.model_dump(), to=sid)

    @sio.event
    async def disconnect(sid, *args):
        rounds.discard(sid)

    @sio.on('round:state')
    async def round_state(sid):
        try:
            view = rounds.get(sid)
        except SessionNotFound as exc:
            await sio.emit('error', { 'message': str(exc) }, to=sid)
            return
        await sio.emit('round:state', view.model_dump(), to=sid)

    @sio.on('round:new')
    async def round_new(sid):
        try:
            view = rounds.new_round(sid)
        except (ConfigurationError, SessionNotFound) as exc:
            await sio.emit('error', { 'message': str(exc) }, to=sid)
            return
        await sio.emit('round:state', view.model_dump(), to=sid)

    @sio.on('word:submit')
    async def word_submit(sid, payload):
        try:
            word = payload if isinstance(payload, str) else SubmitRequest.model_validate(payload).word
        except ValidationError:
            await sio.emit('error', { 'message': 'word is required' }, to=sid)
            return
        try:
            response = rounds.submit(sid, word)
        except SessionNotFound as exc:
            await sio.emit('error', { 'message': str(exc) }, to=sid)
            return
        if response.alert:
            await sio.emit('round:alert', response.alert.model_dump(), to=sid)
        elif response.outcome == 'accepted':
            await sio.emit('round:state', response.round.model_dump(), to=sid)

def create_application(config_class=Config, words: Optional[WordListProvider] = None,
                       dictionary: Optional[DictionaryService] = None) -> socketio.ASGIApp:
    """Build the FastAPI app and mount its Socket.IO server in front of it."""
    fastapi_app = create_app(config_class, words=words, dictionary=dictionary)
    return socketio.ASGIApp(fastapi_app.state.sio, other_asgi_app=fastapi_app)

# Export ASGI app for uvicorn
app = create_app()
application = socketio.ASGIApp(app.state.sio, other_asgi_app=app)

# For local running: uvicorn wordscramble.main:application --reload --host 127.0.0.1 --port 8000
