"""Step-by-step play through a campaign."""

import logging
from typing import Optional

from .config import Campaign, CampaignStep
from .progress import ProgressStore, progress_key
from proofcraft.proofs.result import CheckResult
from proofcraft.session import ProofSession
from proofcraft.utils.config import EngineConfig


logger = logging.getLogger(__name__)


class CampaignRunner:
    """Drives a proof session through the steps of a campaign.

    Gameplay steps advance only once the session's last line reaches the
    step's target outside every assumption. Info steps advance when
    acknowledged. Finishing the last step marks the campaign complete in the
    progress store.
    """

    def __init__(self, campaign: Campaign,
                 store: Optional[ProgressStore] = None,
                 user: str = "Guest",
                 config: Optional[EngineConfig] = None):
        self.campaign = campaign
        self.store = store
        self.user = user
        self.session = ProofSession(config)
        self.finished = False

        start = store.step_index(self.key) if store is not None else 0
        self.current_index = max(0, min(start, len(campaign) - 1))
        self.enter_step(self.current_index)

    @property
    def key(self) -> str:
        return progress_key(self.user, self.campaign.id)

    @property
    def current_step(self) -> Optional[CampaignStep]:
        if self.finished:
            return None
        return self.campaign.steps[self.current_index]

    @property
    def target(self) -> Optional[str]:
        step = self.current_step
        return step.target if step is not None and step.is_gameplay else None

    def enter_step(self, index: int):
        self.current_index = index
        if self.store is not None:
            self.store.save_step_index(self.key, index)
        self.session.reset()
        logger.info("campaign %s: entering step %d (%s)", self.campaign.id, index, self.campaign.steps[index].id)

    def check(self) -> Optional[CheckResult]:
        """Check the session against the current target, if there is one."""
        if self.target is None:
            return None
        return self.session.check_against_target(self.target)

    def acknowledge(self) -> bool:
        """Move past an info step. Returns False on gameplay steps."""
        step = self.current_step
        if step is None or step.is_gameplay:
            return False
        self._complete_current_step()
        return True

    def next_problem(self) -> Optional[CheckResult]:
        """Advance past a solved gameplay step.

        Returns the check result (the step advanced only if it is
        ``Reached``), or None when the current step is not a gameplay step.
        """
        result = self.check()
        if result is not None and result.reached:
            self._complete_current_step()
        return result

    def _complete_current_step(self):
        next_index = self.current_index + 1
        if next_index >= len(self.campaign):
            self._finish()
            return
        self.enter_step(next_index)

    def _finish(self):
        self.finished = True
        if self.store is not None:
            self.store.mark_complete(self.key)
        logger.info("campaign %s complete for %s", self.campaign.id, self.user)
