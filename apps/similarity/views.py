from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .exceptions import EmbeddingProviderError
from .serializers import GroupItemsInputSerializer, GroupItemsResponseSerializer
from .services import group_items


@extend_schema(
    request=GroupItemsInputSerializer,
    responses={200: GroupItemsResponseSerializer},
    description="Group items whose texts mean the same thing and total their prices.",
    tags=['similarity'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def group_items_view(request):
    serializer = GroupItemsInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    items = [dict(item) for item in serializer.validated_data['items']]
    try:
        groups = group_items(items)
    except EmbeddingProviderError as e:
        return Response({
            'message': 'Failed to group items',
            'error': str(e.detail),
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({'groups': groups})
