"""Decider reconciliation: build the desired Decider for a PodAutoscaler and diff-apply it to the registry."""

import logging

from autoscaler.application.deciders import Deciders
from autoscaler.application.exceptions import DeciderNotFoundError
from autoscaler.config.autoscaler_config import AutoscalerConfig
from autoscaler.core.context import reconcile_scope
from autoscaler.domain.models.decider import Decider
from autoscaler.domain.models.pod_autoscaler import PodAutoscaler
from autoscaler.resources.decider import make_decider

logger = logging.getLogger(__name__)


def _needs_update(current: Decider, desired: Decider) -> bool:
    return (
        current.spec != desired.spec
        or current.metadata.labels != desired.metadata.labels
        or current.metadata.annotations != desired.metadata.annotations
        or current.metadata.owner_references != desired.metadata.owner_references
    )


class DeciderReconciler:
    """
    Creates the Decider on first sight of a PA, updates it when a resolved field changes,
    and deletes it when the PA is removed. One reconcile per key at a time is the caller's concern.
    """

    def __init__(self, deciders: Deciders, config: AutoscalerConfig) -> None:
        self._deciders = deciders
        self._config = config

    async def reconcile(self, pa: PodAutoscaler, service_name: str) -> Decider:
        """Make the registry hold the desired Decider for pa. Registry errors propagate."""
        with reconcile_scope(pa.metadata.key, logger) as log:
            desired = make_decider(pa, self._config, service_name)
            try:
                current = await self._deciders.get(pa.namespace, pa.name)
            except DeciderNotFoundError:
                log.info("Creating Decider %s", desired.key)
                return await self._deciders.create(desired)

            if not _needs_update(current, desired):
                log.debug("Decider %s is up to date", desired.key)
                return current

            updated = desired.model_copy(deep=True)
            updated.metadata.uid = current.metadata.uid
            updated.metadata.generation = current.metadata.generation
            updated.metadata.resource_version = current.metadata.resource_version
            log.info(
                "Updating Decider %s: target_concurrency=%g panic_threshold=%g",
                desired.key,
                desired.spec.target_concurrency,
                desired.spec.panic_threshold,
            )
            return await self._deciders.update(updated)

    async def finalize(self, namespace: str, name: str) -> None:
        """Delete the Decider for a removed PA. Already-deleted is not an error."""
        key = f"{namespace}/{name}"
        with reconcile_scope(key, logger) as log:
            try:
                await self._deciders.delete(namespace, name)
            except DeciderNotFoundError:
                log.debug("Decider %s already deleted", key)
                return
            log.info("Deleted Decider %s", key)
