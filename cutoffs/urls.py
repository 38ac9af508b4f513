from django.urls import path, include
from django.views.decorators.csrf import csrf_exempt
from django.conf import settings
from graphene_django.views import GraphQLView
from rest_framework.routers import DefaultRouter
from cutoffs.views import CutoffRecordViewSet, rank_search, filter_options, dashboard

router = DefaultRouter()
router.register(r'cutoffs', CutoffRecordViewSet)

urlpatterns = [
    path('api/cutoffs/by-rank/', rank_search, name='api_rank_search'),
    path('api/filters/', filter_options, name='api_filter_options'),
    path('api/', include(router.urls)),
    path('graphql/', csrf_exempt(GraphQLView.as_view(graphiql=settings.DEBUG)), name='graphql'),
    path('dashboard/', dashboard, name='dashboard'),
]
