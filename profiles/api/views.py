"""Profiles API views.

Member list and user pages. Users are addressed by username; a rename moves
the avatar along with the account.
"""

from django.http import Http404
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from common.api.params import parse_page, parse_search
from common.api.serializers import page_data
from common.media import AVATARS, apply_file_intents, save_image, validate_image
from profiles import queries, services
from reviews.api.serializers import UserRatingSerializer
from reviews.queries import user_rating_history
from .permissions import CanEditOrRemoveUser
from .serializers import UserPatchSerializer, UserSerializer


class UserListAPIView(APIView):
    """GET /api/users/ -> searchable page of users in registration order."""

    def get(self, request, *args, **kwargs):
        page = queries.list_users(
            parse_page(request.query_params), parse_search(request.query_params)
        )
        return Response({"page": page_data(page, UserSerializer, {"request": request})})


class UserDetailAPIView(APIView):
    """
    API endpoint for one user.

    - GET returns the user and a page of their ratings, newest first.
    - PATCH edits username, password and avatar (the user or an admin).
    - DELETE removes the account (the user or an admin; never an admin account).
    """

    permission_classes = [CanEditOrRemoveUser]
    parser_classes = (JSONParser, FormParser, MultiPartParser)

    def get_object(self, username):
        user = queries.get_user(username)
        if user is None:
            raise Http404("No user with this username.")
        self.check_object_permissions(self.request, user)
        return user

    def get(self, request, username, *args, **kwargs):
        user = self.get_object(username)
        context = {"request": request}
        ratings = user_rating_history(username, parse_page(request.query_params))
        return Response(
            {
                "user": UserSerializer(user, context=context).data,
                "ratings": page_data(ratings, UserRatingSerializer, context),
            }
        )

    def patch(self, request, username, *args, **kwargs):
        self.get_object(username)
        serializer = UserPatchSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        avatar = data.get("avatar")
        if avatar is not None:
            validate_image(avatar)
            has_avatar = True
        elif data.get("clear_avatar"):
            has_avatar = False
        else:
            has_avatar = None

        update = services.UserUpdate(
            new_username=data.get("username"),
            has_avatar=has_avatar,
            new_password1=data.get("password1"),
            new_password2=data.get("password2"),
        )
        user, intents = services.edit_user(username, update)
        if user is None:
            raise Http404("No user with this username.")
        apply_file_intents(intents)
        if avatar is not None:
            save_image(AVATARS, user.username, avatar)

        user = queries.get_user(user.username)
        return Response({"user": UserSerializer(user, context={"request": request}).data})

    def delete(self, request, username, *args, **kwargs):
        self.get_object(username)
        apply_file_intents(services.remove_user(username))
        return Response(status=status.HTTP_204_NO_CONTENT)
