from rest_framework import serializers
from .models import CutoffRecord


class CutoffRecordSerializer(serializers.ModelSerializer):
    class Meta:
        model = CutoffRecord
        fields = '__all__'


class RankFilterSerializer(serializers.Serializer):
    minRank = serializers.IntegerField()
    maxRank = serializers.IntegerField()
    branchCodes = serializers.ListField(child=serializers.CharField(), required=False, allow_null=True)
    casteColumns = serializers.ListField(child=serializers.CharField(), required=False, allow_null=True)
    distCodes = serializers.ListField(child=serializers.CharField(), required=False, allow_null=True)
    coEdu = serializers.BooleanField(required=False, allow_null=True, default=False)


class RankedCutoffSerializer(serializers.Serializer):
    sno = serializers.IntegerField()
    inst_code = serializers.CharField()
    institute_name = serializers.CharField()
    place = serializers.CharField(allow_blank=True)
    dist_code = serializers.CharField()
    branch_code = serializers.CharField()
    branch_name = serializers.CharField()
    co_education = serializers.CharField(allow_blank=True)
    dynamicCastes = serializers.DictField(source='dynamic_castes')
