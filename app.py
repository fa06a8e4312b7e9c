"""WSGI entry point.

    flask --app app run
    flask --app app complete-internships
"""

from src.internship_portal.internship_portal.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
