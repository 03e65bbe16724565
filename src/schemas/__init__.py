from schemas.tokens import AccessTokenPayload
from schemas.accounts import (
    UserRegistrationRequestSchema,
    UserLoginRequestSchema,
    UserLoginResponseSchema,
    TokenRefreshRequestSchema,
    TokenRefreshResponseSchema,
    MessageResponseSchema,
)
from schemas.users import UserSchema, UserUpdateRequestSchema
from schemas.collections import (
    MovieRefSchema,
    WatchlistItemSchema,
    WatchlistStatusSchema,
    FavoriteSchema,
    FavoriteStatusSchema,
    WatchEventSchema,
    DiaryEntryCreateSchema,
    DiaryEntryUpdateSchema,
    DiaryEntrySchema,
    DiaryStatusSchema,
)
from schemas.follows import (
    FollowCreateSchema,
    FollowSchema,
    FollowStatusSchema,
)
from schemas.lists import (
    ListCreateSchema,
    ListUpdateSchema,
    ListSchema,
    ListItemCreateSchema,
    ListItemSchema,
)
from schemas.recommendations import RecommendationsResponseSchema
