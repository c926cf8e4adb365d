"""
Interface Layer
- Purpose: Expose the classification engine over HTTP and WebSocket
- Key Directories:
    - routers: REST endpoints
    - ws: real-time tracking socket
    - schemas: client message models
    - di: per-session dependencies
"""
