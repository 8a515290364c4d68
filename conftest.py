"""Configure test environment."""

import os
import sys
from pathlib import Path
from dotenv import load_dotenv

# Add the project directory to the Python path
project_dir = Path(__file__).parent
sys.path.insert(0, str(project_dir))

# Set testing flag
os.environ["TESTING"] = "true"
os.environ.setdefault("LOG_LEVEL", "WARNING")

# Load environment variables from .env.test when present
env_file = project_dir / '.env.test'
load_dotenv(env_file)
