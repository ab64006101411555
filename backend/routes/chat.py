"""Chat routes for the HVAC design assistant (HTTP and WebSocket)."""

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from schemas import ChatRequest, ChatResponse
from services.chat import chat, ChatUnavailableError, GREETING

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/api/chat", response_model=ChatResponse)
async def chat_http(request: ChatRequest):
    """Answer the latest message of the conversation history."""
    history = [msg.model_dump() for msg in request.history]
    try:
        content = await chat(history)
    except ChatUnavailableError as e:
        return ChatResponse(error=str(e))
    return ChatResponse(content=content)


@router.websocket("/api/chat/ws")
async def chat_websocket(websocket: WebSocket):
    """WebSocket endpoint for real-time chat; history is kept per connection."""
    await websocket.accept()

    history = [{"role": "model", "content": GREETING}]

    try:
        while True:
            data = await websocket.receive_text()
            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                message = None
            if not isinstance(message, dict):
                await websocket.send_text(json.dumps({"content": "", "error": "Invalid message format"}))
                continue

            user_text = str(message.get("message", "")).strip()
            if not user_text:
                continue

            history.append({"role": "user", "content": user_text})
            try:
                content = await chat(history)
            except ChatUnavailableError as e:
                # Unanswered turn is dropped so the user can resend it
                history.pop()
                await websocket.send_text(json.dumps({"content": "", "error": str(e)}))
                continue

            history.append({"role": "model", "content": content})
            await websocket.send_text(json.dumps({"content": content, "error": None}))

    except WebSocketDisconnect:
        logger.debug("Chat websocket closed after %d messages", len(history))
    except Exception as e:
        logger.exception("Chat websocket failed")
        try:
            await websocket.send_text(json.dumps({
                "content": "",
                "error": f"Sorry, an error occurred: {str(e)}",
            }))
        except Exception:
            logger.debug("Could not report error to closed chat websocket")
