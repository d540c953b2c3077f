"""Inicia a API de contatos com uvicorn: ``python -m contacts_api``."""

import os

import uvicorn


def main() -> None:
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("contacts_api.main:app", host=host, port=port, log_level="info")


if __name__ == "__main__":
    main()
