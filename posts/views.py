# posts/views.py
from rest_framework import viewsets, mixins, status
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema_view, extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from core.pagination import EnvelopePagination
from posts.models import Post, TOPIC_CHOICES
from posts.serializers import PostSerializer
import logging

logger = logging.getLogger(__name__)


class PostPagination(EnvelopePagination):
    results_key = "posts"


@extend_schema_view(
    list=extend_schema(
        description="List community posts, newest first",
        summary="List Posts",
        tags=["Posts"],
        parameters=[
            OpenApiParameter(
                name="category",
                type=OpenApiTypes.STR,
                enum=[value for value, _ in TOPIC_CHOICES],
            )
        ],
    ),
    create=extend_schema(
        description="Publish a community post", summary="Create Post", tags=["Posts"]
    ),
    retrieve=extend_schema(
        description="Get a single post", summary="Get Post", tags=["Posts"]
    ),
    destroy=extend_schema(
        description="Delete one of your own posts", summary="Delete Post", tags=["Posts"]
    ),
)
class PostViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """ViewSet for community posts"""

    serializer_class = PostSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PostPagination
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        queryset = Post.objects.select_related("author")
        category = self.request.query_params.get("category")
        if category:
            queryset = queryset.filter(category=category)
        return queryset

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        post = serializer.save(author=request.user)

        logger.info(f"User {request.user.id} created post {post.id}")
        return Response(
            {"success": True, "data": serializer.data}, status=status.HTTP_201_CREATED
        )

    def retrieve(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object())
        return Response({"success": True, "data": serializer.data})

    def destroy(self, request, *args, **kwargs):
        post = self.get_object()
        if post.author_id != request.user.id:
            raise PermissionDenied("You can only delete your own posts")

        post.delete()
        logger.info(f"User {request.user.id} deleted post {kwargs.get('pk')}")
        return Response({"success": True, "message": "Post deleted successfully"})
