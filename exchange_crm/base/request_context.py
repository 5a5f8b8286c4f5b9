""" Request scoped helpers (acting user, query args)... """

# Python Packages
from flask import has_request_context, request


USER_HEADER = "X-User-Id"





def current_user_id():
    """
    Acting user for created_by / changed_by columns

    Sign-in lives in the hosted auth service, the gateway forwards the
    user id in a header. Outside a request there is no actor.
    """

    if not has_request_context():
        return None

    user_id = request.headers.get(USER_HEADER)

    return user_id.strip() if user_id and user_id.strip() else None


def query_args() -> dict:
    """ Query string as a plain dict (blank values dropped) """

    return {
        key: value
        for key, value in request.args.items()
        if value not in (None, "")
    }


def json_body() -> dict:
    """ JSON payload or {} """

    return request.get_json(silent = True) or {}
