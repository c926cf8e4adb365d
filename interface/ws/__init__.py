from .websocket_router import websocket_router
from .frame_gate import FrameRateGate

__all__ = ["websocket_router", "FrameRateGate"]
