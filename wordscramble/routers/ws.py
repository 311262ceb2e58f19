from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ..errors import ConfigurationError, SessionExists

router = APIRouter()

@router.websocket("/{session_id}")
async def websocket_endpoint(websocket: WebSocket, session_id: str):
    await websocket.accept()
    rounds = websocket.app.state.rounds

    try:
        view = rounds.create(session_id)
    except SessionExists as exc:
        # Someone else's round; leave it alone
        await websocket.send_json({"type": "error", "message": str(exc)})
        await websocket.close(code=1008)
        return
    except ConfigurationError as exc:
        await websocket.send_json({"type": "error", "message": str(exc)})
        await websocket.close(code=1011)
        return

    try:
        # Send initial state to player
        await websocket.send_json({"type": "state", **view.model_dump()})
        while True:
            try:
                data = await websocket.receive_json()
            except ValueError:
                await websocket.send_json({"type": "error", "message": "Messages must be JSON"})
                continue
            kind = data.get("type") if isinstance(data, dict) else None
            if kind == "submit":
                response = rounds.submit(session_id, str(data.get("word") or ""))
                if response.alert:
                    await websocket.send_json({"type": "alert", **response.alert.model_dump()})
                elif response.outcome == "accepted":
                    await websocket.send_json({"type": "state", **response.round.model_dump()})
            elif kind == "new":
                try:
                    view = rounds.new_round(session_id)
                except ConfigurationError as exc:
                    await websocket.send_json({"type": "error", "message": str(exc)})
                    continue
                await websocket.send_json({"type": "state", **view.model_dump()})
            else:
                await websocket.send_json({"type": "error", "message": f"Unknown message type: {kind}"})
    except WebSocketDisconnect:
        pass
    finally:
        rounds.discard(session_id)
