import os
import pathlib
from dotenv import load_dotenv

load_dotenv()

default_db_path = pathlib.Path(__file__).parent / "daily_missions.sqlite3"

mission_agent_url = os.getenv("MISSION_AGENT_URL")
chat_api_base_url = os.getenv("CHAT_API_BASE_URL", "https://babybeasts.up.railway.app")
mission_db_url = os.getenv("MISSION_DB_URL", f"sqlite+aiosqlite:///{default_db_path}")
freshness_window_ms = int(os.getenv("MISSION_FRESHNESS_WINDOW_MS", "86400000"))

if __name__ == "__main__":
    print(mission_agent_url, chat_api_base_url, mission_db_url, freshness_window_ms)
