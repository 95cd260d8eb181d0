from .base import create_app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("resume_analyzer.main:app", host="0.0.0.0", port=8000)
