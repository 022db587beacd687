from pathlib import Path

from ...config import settings

PROJECT_ROOT = Path(__file__).resolve().parents[3]

DATA_DIR = PROJECT_ROOT / "data"

DATABASE_PATH = DATA_DIR / "pinyin_chart.db"
DATABASE_URL = settings.database_url or f"sqlite:///{DATABASE_PATH}"

BASELINE_FILE = Path(settings.baseline_file) if settings.baseline_file else DATA_DIR / "baseline_pinyin_data.json"

RULE_TABLE_FILE = Path(settings.rule_table_file) if settings.rule_table_file else None
