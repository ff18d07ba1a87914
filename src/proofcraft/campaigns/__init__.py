"""
Campaigns: ordered proof targets, step sequencing and saved progress.
"""

from .config import Campaign, CampaignStep, DEFAULT_TARGETS
from .progress import ProgressStore, progress_key
from .runner import CampaignRunner

__all__ = [
    'Campaign', 'CampaignStep', 'DEFAULT_TARGETS',
    'ProgressStore', 'progress_key',
    'CampaignRunner'
]
