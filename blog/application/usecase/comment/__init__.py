"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
)
from .get_comments import (
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentUseCase,
)
from .list_comments import (
    ListCommentsResponse,
    ListReportedCommentsRequest,
    ListReportedCommentsUseCase,
    ListUserCommentsRequest,
    ListUserCommentsUseCase,
)
from .report_comment import (
    DismissReportRequest,
    DismissReportUseCase,
    ReportCommentRequest,
    ReportCommentUseCase,
    ReportStateResponse,
)
from .schemas import CommentItem, CommentTreeItem
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CommentTreeItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "DismissReportRequest",
    "DismissReportUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "ListCommentsResponse",
    "ListReportedCommentsRequest",
    "ListReportedCommentsUseCase",
    "ListUserCommentsRequest",
    "ListUserCommentsUseCase",
    "RemoveCommentRequest",
    "RemoveCommentUseCase",
    "ReportCommentRequest",
    "ReportCommentUseCase",
    "ReportStateResponse",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
