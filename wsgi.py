# wsgi.py - WSGI entry point (gunicorn wsgi:app)
import os

from app import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=os.getenv("FLASK_DEBUG", "0") == "1")
