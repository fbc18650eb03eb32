"""Workflow Engine - Status state machine for license tasks"""
from .status_workflow import StatusWorkflow, TransitionPlan

__all__ = [
    "StatusWorkflow",
    "TransitionPlan",
]
