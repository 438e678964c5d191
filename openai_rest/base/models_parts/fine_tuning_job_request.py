"""
FineTuningJobRequest payload for ``POST fine_tuning/jobs``.

Carries the training file reference plus the legacy top-level training knobs
(``n_epochs``, ``batch_size``, classification metrics) as well as the
``hyperparameters`` object accepted by current API versions.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..payload import Payload


class FineTuningJobRequest(Payload):
    """Request body for creating a fine-tuning job.

    Attributes:
        model: Base model to fine-tune.
        training_file: Uploaded file id holding the training data.
        validation_file: Uploaded file id holding validation data.
        hyperparameters: Hyperparameter object (``n_epochs``, ``batch_size``,
            ``learning_rate_multiplier``).
        suffix: Suffix appended to the fine-tuned model name.
        seed: Seed for reproducible jobs.
    """

    model: str
    training_file: str
    validation_file: Optional[str] = None
    n_epochs: Optional[int] = None
    batch_size: Optional[int] = None
    learning_rate_multiplier: Optional[float] = None
    prompt_loss_weight: Optional[float] = None
    compute_classification_metrics: Optional[bool] = None
    classification_n_classes: Optional[int] = None
    classification_positive_class: Optional[str] = None
    classification_betas: Optional[List[float]] = None
    hyperparameters: Optional[Dict[str, Any]] = None
    suffix: Optional[str] = None
    seed: Optional[int] = None


__all__ = ["FineTuningJobRequest"]
