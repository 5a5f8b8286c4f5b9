""" Process level app for `flask --app exchange_crm.wsgi run` and WSGI servers """

# Local Imports
from .app import create_app


app = create_app()


if __name__ == "__main__":
    app.run(host = "0.0.0.0", port = 5000)
