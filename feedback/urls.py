# feedback/urls.py
from django.urls import path

from .views import PersonCampaignListView, PersonCampaignCreateView, PersonCampaignDetailView

app_name = "feedback"

urlpatterns = [
    path("people/<int:pk>/campaigns/", PersonCampaignListView.as_view(), name="person_campaigns"),
    path("people/<int:pk>/campaigns/new/", PersonCampaignCreateView.as_view(), name="campaign_create"),
    path("people/<int:person_pk>/campaigns/<int:pk>/", PersonCampaignDetailView.as_view(), name="campaign_detail"),
]
