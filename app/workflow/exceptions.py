class WorkflowError(Exception):
    """Base exception for client workflow errors."""

    user_message = "Action is not possible right now"


class OperationInProgressError(WorkflowError):
    """Raised when an extraction or analysis starts while another is in flight."""

    user_message = "Please wait for the current operation to finish"
