# run_dev.py
"""
Local development launcher for the gateway.
Equivalent to: `uvicorn chatbot.app:app --reload --host $HOST --port $PORT`
"""

import uvicorn

from chatbot.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "chatbot.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
    )
