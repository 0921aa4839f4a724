"""Exceptions raised by StepMaster."""


class StepMasterError(Exception):
    """Base class for tracker errors."""


class InvalidGoalError(StepMasterError, ValueError):
    """Daily goal below the accepted minimum."""

    def __init__(self, goal: int, minimum: int):
        self.goal = goal
        self.minimum = minimum
        super().__init__(f"Daily goal must be at least {minimum} steps, got {goal}")
