"""
API Models for request/response Swagger documentation

Models are plain ``Model`` objects so they can be registered on every Api
instance the app factory builds.
"""

from flask_restx import Model, fields

# =============================================================================
# Request Models
# =============================================================================

user_request = Model(
    "UserRequest",
    {
        "email": fields.String(required=True, example="bob@dylan.com"),
        "password": fields.String(required=True, example="toto1234!"),
    },
)

file_request = Model(
    "FileRequest",
    {
        "name": fields.String(required=True, example="myText.txt"),
        "type": fields.String(
            required=True,
            enum=["folder", "file", "image"],
            example="file",
        ),
        "parentId": fields.String(
            description="Folder ID, or 0 for the root",
            default="0",
        ),
        "isPublic": fields.Boolean(default=False),
        "data": fields.String(
            description="Base64 content, required unless type is folder",
            example="SGVsbG8gV2Vic3RhY2shCg==",
        ),
    },
)

# =============================================================================
# Response Models
# =============================================================================

error_response = Model(
    "ErrorResponse",
    {"error": fields.String(description="Error message", example="Unauthorized")},
)

user_response = Model(
    "UserResponse",
    {
        "id": fields.String(description="User ID"),
        "email": fields.String(description="Login email"),
    },
)

token_response = Model(
    "TokenResponse",
    {"token": fields.String(description="Session token for the X-Token header")},
)

file_response = Model(
    "FileResponse",
    {
        "id": fields.String(description="File ID"),
        "userId": fields.String(description="Owner ID"),
        "name": fields.String(),
        "type": fields.String(enum=["folder", "file", "image"]),
        "isPublic": fields.Boolean(),
        "parentId": fields.Raw(description="Parent folder ID, or 0 for the root"),
    },
)

status_response = Model(
    "StatusResponse",
    {
        "redis": fields.Boolean(description="Session store reachable"),
        "db": fields.Boolean(description="Metadata store reachable"),
    },
)

stats_response = Model(
    "StatsResponse",
    {
        "users": fields.Integer(description="Registered users"),
        "files": fields.Integer(description="File records"),
    },
)

ALL_MODELS = (
    user_request,
    file_request,
    error_response,
    user_response,
    token_response,
    file_response,
    status_response,
    stats_response,
)
