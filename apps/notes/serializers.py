from rest_framework import serializers
from .models import Note, NoteFormat


# =============================================================================
# Input Serializers
# =============================================================================

class NoteFilterSerializer(serializers.Serializer):
    pinned = serializers.BooleanField(required=False, allow_null=True, default=None)


class TableDataSerializer(serializers.Serializer):
    headers = serializers.ListField(child=serializers.CharField(allow_blank=True), allow_empty=False)
    rows = serializers.ListField(
        child=serializers.ListField(child=serializers.CharField(allow_blank=True)),
        required=False,
        default=list
    )

    def validate(self, attrs):
        width = len(attrs['headers'])
        for row in attrs['rows']:
            if len(row) > width:
                raise serializers.ValidationError('Table rows cannot be wider than the headers')
        return attrs


# =============================================================================
# Model Serializers
# =============================================================================

class NoteSerializer(serializers.ModelSerializer):
    """
    Serializer for notes.

    Text notes need content; table notes need table data instead.
    """

    labels = serializers.ListField(
        child=serializers.CharField(max_length=50),
        required=False,
        default=list
    )
    table_data = serializers.JSONField(required=False, allow_null=True)

    class Meta:
        model = Note
        fields = [
            'id',
            'title',
            'content',
            'format',
            'table_data',
            'color',
            'labels',
            'pinned',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_table_data(self, value):
        if value is None:
            return value
        table = TableDataSerializer(data=value)
        table.is_valid(raise_exception=True)
        return table.validated_data

    def validate_labels(self, value):
        # Drop blanks and duplicates, keep order
        seen = []
        for label in (v.strip() for v in value):
            if label and label not in seen:
                seen.append(label)
        return seen

    def validate(self, attrs):
        instance = self.instance
        note_format = attrs.get('format', instance.format if instance else NoteFormat.TEXT)
        content = attrs.get('content', instance.content if instance else '')
        table_data = attrs.get('table_data', instance.table_data if instance else None)

        if note_format == NoteFormat.TABLE:
            if not table_data:
                raise serializers.ValidationError({'table_data': 'Table notes need table data'})
        elif not content:
            raise serializers.ValidationError({'content': 'Content is required'})

        return attrs
