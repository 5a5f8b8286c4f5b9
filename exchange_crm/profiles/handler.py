"""
File: Profile Routes

Handles:
    - List / Search Profiles
    - Add Profile
    - Profile Detail
    - Edit Profile
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.profile_request import ProfileRequest
from ..base.common_requests import QueryRequest

# Validations
from .validations.profile_validation import ProfileValidation

# Controller
from .controller import ProfileController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
profile_namespace = Namespace('profiles', description = 'Profile (people) APIs')





@profile_namespace.route('')
class ProfileList(Resource):

    @QueryRequest.apply(profile_namespace, search = "First name, last name or email")
    def get(self):
        """
        List profiles, newest first
        """

        try:
            result = ProfileController().list_profiles(QueryRequest.get_data().get("search"))

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @ProfileRequest.apply(profile_namespace)
    def post(self):
        """
        Create profile
        """

        try:
            # Args
            args = ProfileRequest.get_data()

            # Validations
            ProfileValidation().validate_create(args)

            # Controller
            result = ProfileController().create_profile(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@profile_namespace.route('/<int:profile_id>')
class ProfileDetail(Resource):

    def get(self, profile_id):
        """
        Profile with its tax accounts
        """

        try:
            result = ProfileController().get_profile(profile_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @ProfileRequest.apply(profile_namespace)
    def put(self, profile_id):
        """
        Edit profile (partial)
        """

        try:
            args = ProfileRequest.get_data()

            ProfileValidation().validate_update(args)

            result = ProfileController().update_profile(profile_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
