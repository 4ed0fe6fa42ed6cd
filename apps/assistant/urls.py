from django.urls import path
from .views import AssistantView, AssistantResetView

urlpatterns = [
    path('', AssistantView.as_view(), name='assistant'),
    path('reset/', AssistantResetView.as_view(), name='assistant-reset'),
]
