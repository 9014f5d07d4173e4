# apps/immune/serializers.py
"""
Immune API serializers
"""
from rest_framework import serializers


class RespondRequestSerializer(serializers.Serializer):
    """Validate respond request data"""

    antigen = serializers.IntegerField()


class AntibodySerializer(serializers.Serializer):
    """
    Response schema for domain Antibody value objects

    Mirrors Antibody.to_dict().
    """

    antigen = serializers.IntegerField(source="antigen.value")
    effort = serializers.IntegerField(min_value=0)
    recalled = serializers.BooleanField()
