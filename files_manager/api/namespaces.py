"""
API Namespaces - Organized endpoint groups

Resources parse the request into a request structure, call one application
or domain service resolved from the container and serialize the result.
Domain errors propagate to the Api error handlers.
"""

from flask import Response, current_app, g, request, send_file
from flask_restx import Namespace, Resource

from ..application import (
    AuthService,
    FileContentRequest,
    FileContentService,
    ListFilesRequest,
    RegisterUserRequest,
    StatusService,
    UploadFileRequest,
    UploadService,
    UserService,
)
from ..domain.files import FileManager
from .auth_decorator import TOKEN_HEADER, token_optional, token_required
from .models import (
    error_response,
    file_request,
    file_response,
    stats_response,
    status_response,
    token_response,
    user_request,
    user_response,
)


def _resolve(interface):
    return current_app.container.resolve(interface)


def _json_body():
    return request.get_json(silent=True) or {}


token_header_doc = {TOKEN_HEADER: {"description": "Session token from /connect", "in": "header"}}

# =============================================================================
# Status Namespace - Store liveness and counters
# =============================================================================

status_ns = Namespace("status", description="Operational endpoints", path="/")


@status_ns.route("/status")
class Status(Resource):
    """Store liveness"""

    @status_ns.doc("get_status")
    @status_ns.response(200, "Success", status_response)
    @status_ns.response(500, "A store is unreachable", status_response)
    def get(self):
        """Report whether the session and metadata stores are reachable"""
        health = _resolve(StatusService).status()
        return health, 200 if all(health.values()) else 500


@status_ns.route("/stats")
class Stats(Resource):
    """Record counters"""

    @status_ns.doc("get_stats")
    @status_ns.response(200, "Success", stats_response)
    @status_ns.response(500, "Internal Server Error", error_response)
    def get(self):
        """Count registered users and file records"""
        return _resolve(StatusService).stats(), 200


# =============================================================================
# Users Namespace - Registration and profile
# =============================================================================

users_ns = Namespace("users", description="User operations", path="/")


@users_ns.route("/users")
class Users(Resource):
    """User registration"""

    @users_ns.doc("register_user")
    @users_ns.expect(user_request)
    @users_ns.response(201, "Created", user_response)
    @users_ns.response(400, "Bad Request", error_response)
    def post(self):
        """
        Register a new user

        Fails with "Missing email", "Missing password" or "Already exist".
        """
        user = _resolve(UserService).register(RegisterUserRequest.from_payload(_json_body()))
        return user.to_public_dict(), 201


@users_ns.route("/users/me")
class CurrentUser(Resource):
    """Authenticated user profile"""

    @users_ns.doc("get_current_user", params=token_header_doc)
    @users_ns.response(200, "Success", user_response)
    @users_ns.response(401, "Unauthorized", error_response)
    @token_required
    def get(self):
        """Return the user owning the session token"""
        return g.current_user.to_public_dict(), 200


# =============================================================================
# Auth Namespace - Session lifecycle
# =============================================================================

auth_ns = Namespace("auth", description="Session operations", path="/")


@auth_ns.route("/connect")
class Connect(Resource):
    """Login"""

    @auth_ns.doc("connect", params={"Authorization": {"description": "Basic email:password", "in": "header"}})
    @auth_ns.response(200, "Success", token_response)
    @auth_ns.response(401, "Unauthorized", error_response)
    def get(self):
        """Exchange basic-auth credentials for a session token"""
        token = _resolve(AuthService).connect(request.headers.get("Authorization"))
        return {"token": token}, 200


@auth_ns.route("/disconnect")
class Disconnect(Resource):
    """Logout"""

    @auth_ns.doc("disconnect", params=token_header_doc)
    @auth_ns.response(204, "Disconnected")
    @auth_ns.response(401, "Unauthorized", error_response)
    def get(self):
        """Revoke the session token"""
        _resolve(AuthService).disconnect(request.headers.get(TOKEN_HEADER))
        return Response(status=204)


# =============================================================================
# Files Namespace - Upload, listing, visibility and content
# =============================================================================

files_ns = Namespace("files", description="File operations", path="/")


@files_ns.route("/files")
class Files(Resource):
    """File collection"""

    @files_ns.doc("upload_file", params=token_header_doc)
    @files_ns.expect(file_request)
    @files_ns.response(201, "Created", file_response)
    @files_ns.response(400, "Bad Request", error_response)
    @files_ns.response(401, "Unauthorized", error_response)
    @token_required
    def post(self):
        """
        Create a folder, file or image

        Non-folder content is sent base64-encoded in ``data``. Images are
        queued for thumbnail generation.
        """
        upload_request = UploadFileRequest.from_payload(_json_body())
        record = _resolve(UploadService).upload(g.current_user.user_id, upload_request)
        return record.to_public_dict(), 201

    @files_ns.doc(
        "list_files",
        params={
            **token_header_doc,
            "parentId": {"description": "Folder ID, 0 for the root", "in": "query"},
            "page": {"description": "Zero-indexed page of 20 records", "in": "query"},
        },
    )
    @files_ns.response(200, "Success", [file_response])
    @files_ns.response(401, "Unauthorized", error_response)
    @token_required
    def get(self):
        """List one page of the user's records under a parent"""
        list_request = ListFilesRequest.from_query(request.args)
        records = _resolve(FileManager).list(
            g.current_user.user_id, list_request.parent_id, list_request.page
        )
        return [record.to_public_dict() for record in records], 200


@files_ns.route("/files/<string:file_id>")
@files_ns.param("file_id", "The file identifier")
class File(Resource):
    """Single file record"""

    @files_ns.doc("get_file", params=token_header_doc)
    @files_ns.response(200, "Success", file_response)
    @files_ns.response(401, "Unauthorized", error_response)
    @files_ns.response(404, "Not Found", error_response)
    @token_required
    def get(self, file_id):
        """Return a record owned by the user"""
        record = _resolve(FileManager).get(file_id, g.current_user.user_id)
        return record.to_public_dict(), 200


@files_ns.route("/files/<string:file_id>/publish")
@files_ns.param("file_id", "The file identifier")
class PublishFile(Resource):
    """Make a record public"""

    @files_ns.doc("publish_file", params=token_header_doc)
    @files_ns.response(200, "Success", file_response)
    @files_ns.response(401, "Unauthorized", error_response)
    @files_ns.response(403, "Forbidden", error_response)
    @files_ns.response(404, "Not Found", error_response)
    @token_required
    def put(self, file_id):
        record = _resolve(FileManager).set_visibility(file_id, g.current_user.user_id, True)
        return record.to_public_dict(), 200


@files_ns.route("/files/<string:file_id>/unpublish")
@files_ns.param("file_id", "The file identifier")
class UnpublishFile(Resource):
    """Make a record private"""

    @files_ns.doc("unpublish_file", params=token_header_doc)
    @files_ns.response(200, "Success", file_response)
    @files_ns.response(401, "Unauthorized", error_response)
    @files_ns.response(403, "Forbidden", error_response)
    @files_ns.response(404, "Not Found", error_response)
    @token_required
    def put(self, file_id):
        record = _resolve(FileManager).set_visibility(file_id, g.current_user.user_id, False)
        return record.to_public_dict(), 200


@files_ns.route("/files/<string:file_id>/data")
@files_ns.param("file_id", "The file identifier")
class FileData(Resource):
    """Stored content"""

    @files_ns.doc(
        "get_file_data",
        params={
            **token_header_doc,
            "size": {"description": "Thumbnail width: 500, 250 or 100", "in": "query"},
        },
    )
    @files_ns.response(200, "File content")
    @files_ns.response(400, "Folder has no content", error_response)
    @files_ns.response(404, "Not Found", error_response)
    @token_optional
    def get(self, file_id):
        """
        Download content of a public record, or of a private one owned by
        the user. ``size`` selects a generated thumbnail.
        """
        content_request = FileContentRequest.from_query(file_id, request.args)
        requester_id = g.current_user.user_id if g.current_user else None
        content = _resolve(FileContentService).read(content_request, requester_id)
        return send_file(content.stream, mimetype=content.mimetype, download_name=content.record.name)
