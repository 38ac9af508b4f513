from django.conf import settings
from django.shortcuts import render
from rest_framework import viewsets
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .exceptions import InvalidInput, StoreUnavailable
from .models import CutoffRecord
from .serializers import CutoffRecordSerializer, RankFilterSerializer, RankedCutoffSerializer
from . import services


class CutoffRecordViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = CutoffRecord.objects.all()
    serializer_class = CutoffRecordSerializer

    def get_queryset(self):
        queryset = CutoffRecord.objects.all()
        inst_code = self.request.query_params.get('inst_code')
        branch_code = self.request.query_params.get('branch_code')
        dist_code = self.request.query_params.get('dist_code')
        co_education = self.request.query_params.get('co_education')

        if inst_code:
            queryset = queryset.filter(inst_code=inst_code.upper())
        if branch_code:
            queryset = queryset.filter(branch_code=branch_code.upper())
        if dist_code:
            queryset = queryset.filter(dist_code=dist_code.upper())
        if co_education:
            queryset = queryset.filter(co_education=co_education.upper())

        return queryset.order_by("sno")


@api_view(['POST'])
def rank_search(request):
    """
    REST mirror of the tsCutoff2024sByRank GraphQL query.
    """
    params = RankFilterSerializer(data=request.data)
    if not params.is_valid():
        return Response({'error': params.errors}, status=400)
    data = params.validated_data

    try:
        rows = services.search_by_rank(
            min_rank=data['minRank'],
            max_rank=data['maxRank'],
            caste_columns=data.get('casteColumns'),
            branch_codes=data.get('branchCodes'),
            dist_codes=data.get('distCodes'),
            girls_only=bool(data.get('coEdu')),
        )
    except InvalidInput as e:
        return Response({'error': str(e)}, status=400)
    except StoreUnavailable as e:
        return Response({'error': str(e)}, status=503)

    return Response(RankedCutoffSerializer(rows, many=True).data)


@api_view(['GET'])
def filter_options(request):
    try:
        options = services.filter_options()
    except StoreUnavailable as e:
        return Response({'error': str(e)}, status=503)
    return Response(options)


def dashboard(request):
    params = settings.CUTOFF_DASHBOARD_FILTER
    castes = params['caste_columns']
    try:
        rows = services.search_by_rank(
            min_rank=params['min_rank'],
            max_rank=params['max_rank'],
            caste_columns=castes,
            branch_codes=params.get('branch_codes'),
            dist_codes=params.get('dist_codes'),
            girls_only=params.get('girls_only', False),
        )
        error = None
    except StoreUnavailable as e:
        rows, error = [], str(e)

    for row in rows:
        row['ranks'] = [row['dynamic_castes'].get(column) for column in castes]

    context = {
        'title': 'Cutoff 2024',
        'filter': params,
        'castes': castes,
        'rows': rows,
        'error': error,
    }
    return render(request, 'cutoffs/dashboard.html', context, status=503 if error else 200)
