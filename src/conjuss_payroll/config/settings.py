import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Paths
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(Path.cwd() / "output")))

# Optional JSON file replacing the built-in CONJUSS scale
SALARY_SCALE_FILE = os.getenv("SALARY_SCALE_FILE") or None

# Application settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Presentation
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₦")
ORGANIZATION_NAME = os.getenv("ORGANIZATION_NAME", "Judicial Service Committee")
