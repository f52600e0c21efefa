# feedback/views/__init__.py
from .campaigns import PersonCampaignListView, PersonCampaignCreateView, PersonCampaignDetailView

__all__ = ["PersonCampaignListView", "PersonCampaignCreateView", "PersonCampaignDetailView"]
