from dotenv import load_dotenv
import uvicorn

# Load environment variables from .env file before settings are read
load_dotenv()

from easysolutions.core.config import get_settings  # noqa: E402


def main():
    settings = get_settings()
    uvicorn.run("easysolutions.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
