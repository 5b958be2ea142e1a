# main.py
from gallery.application import create_app
from gallery.config import settings

app = create_app(settings)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
