""" Flask-RESTX Api object shared by every namespace... """

# Python Packages
from flask_restx import Api

# Constants
from ..base import constants





# Acting user is passed as a plain header; there is no token auth
USER_HEADER = {
    "type": "apiKey",
    "in": "header",
    "name": "X-User-Id"
}

# Docs are only served outside production
DOCS_PATH = "/swagger/" if constants.APP_ENV != "production" else False


api = Api(
    title = constants.SWAGGER_APP_PROPS["name"],
    version = constants.SWAGGER_APP_PROPS["version"],
    description = constants.SWAGGER_APP_PROPS["description"],
    authorizations = {"User Id": USER_HEADER},
    doc = DOCS_PATH,
    catch_all_404s = True
)
