"""Domain layer (pure logic).

- Keep mission cache rules and response parsing here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI, no aiohttp.
- Time is passed in as an argument (milliseconds since epoch).
"""
