from .common import (
	CamelModel,
	MessageResponse,
	ErrorResponse,
	PagedResult,
	calculate_total_pages,
)
from .category import (
	CategoryCreate,
	CategoryUpdate,
	CategoryResponse,
	CategoryListResponse,
	CategoryDetailResponse,
)
from .post import (
	TimelinePostForm,
	TimelinePostStatusUpdate,
	TimelinePostResponse,
	TimelinePostListResponse,
	TimelinePostCategoryResponse,
	TimelinePostDetailResponse,
	TimelinePostCreateResponse,
	TimelinePostUpdateResponse,
)
from .post_request import (
	PostRequestSubmit,
	PostRequestReview,
	PostRequestResponse,
	PostRequestListResponse,
	PostRequestDetailResponse,
	PostRequestSubmitResponse,
	PostRequestReviewResponse,
	PostRequestStats,
	PostRequestStatsResponse,
)

__all__ = [
	"CamelModel",
	"MessageResponse",
	"ErrorResponse",
	"PagedResult",
	"calculate_total_pages",
	"CategoryCreate",
	"CategoryUpdate",
	"CategoryResponse",
	"CategoryListResponse",
	"CategoryDetailResponse",
	"TimelinePostForm",
	"TimelinePostStatusUpdate",
	"TimelinePostResponse",
	"TimelinePostListResponse",
	"TimelinePostCategoryResponse",
	"TimelinePostDetailResponse",
	"TimelinePostCreateResponse",
	"TimelinePostUpdateResponse",
	"PostRequestSubmit",
	"PostRequestReview",
	"PostRequestResponse",
	"PostRequestListResponse",
	"PostRequestDetailResponse",
	"PostRequestSubmitResponse",
	"PostRequestReviewResponse",
	"PostRequestStats",
	"PostRequestStatsResponse",
]
