# server.py (repo root)
from app.config import config
from app.main import app

# Optional local run:
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.port, access_log=config.access_log)
