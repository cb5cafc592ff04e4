from rest_framework import serializers


class ItemSerializer(serializers.Serializer):
    text = serializers.CharField()
    price = serializers.FloatField()


class GroupItemsInputSerializer(serializers.Serializer):
    items = serializers.ListField(
        child=ItemSerializer(),
        allow_empty=False,
        error_messages={'empty': 'Provide a non-empty array of items with text and price'},
    )


class ItemGroupSerializer(serializers.Serializer):
    name = serializers.CharField()
    number_of_pieces = serializers.IntegerField()
    total_price = serializers.FloatField()
    average_price = serializers.FloatField()
    items = ItemSerializer(many=True)


class GroupItemsResponseSerializer(serializers.Serializer):
    groups = ItemGroupSerializer(many=True)
