import os
import logging
from flask import Blueprint, current_app, request, jsonify, send_file, send_from_directory

from .config import CORS_ALLOW_ORIGIN, CORS_ALLOW_METHODS, CORS_ALLOW_HEADERS
from .exceptions import GalleryError, BadRequestError, ForbiddenError, NotFoundError
from .utils.validators import validate_path_segment, normalize_region, parse_offset, parse_limit

main_bp = Blueprint('main', __name__)
api_bp = Blueprint('api', __name__, url_prefix='/api')
logger = logging.getLogger(__name__)


def _region_service():
    return current_app.extensions['region_gallery']['regions']


def _image_service():
    return current_app.extensions['region_gallery']['images']


def _preflight_response():
    return '', 200, {
        'Access-Control-Allow-Methods': CORS_ALLOW_METHODS,
        'Access-Control-Allow-Headers': CORS_ALLOW_HEADERS,
    }


@api_bp.after_request
def add_cors_headers(response):
    response.headers['Access-Control-Allow-Origin'] = CORS_ALLOW_ORIGIN
    return response


@main_bp.app_errorhandler(GalleryError)
def handle_gallery_error(error):
    return jsonify({"error": error.message}), error.status_code


# API

@api_bp.route('/regions/', methods=['GET', 'OPTIONS'])
def list_regions():
    if request.method == 'OPTIONS':
        return _preflight_response()

    regions = _region_service().list_regions()
    return jsonify({region.name: region.to_dict() for region in regions}), 200


@api_bp.route('/images/', methods=['GET', 'OPTIONS'])
@api_bp.route('/images/<region>', methods=['GET', 'OPTIONS'])
@api_bp.route('/images/<region>/', methods=['GET', 'OPTIONS'])
@api_bp.route('/images/<region>/<path:rest>', methods=['GET', 'OPTIONS'])
def list_region_images(region=None, rest=None):
    if request.method == 'OPTIONS':
        return _preflight_response()

    region = normalize_region(region)
    validate_path_segment("region", region, "Invalid region")
    if not _region_service().is_allowed(region):
        raise ForbiddenError("region", "Invalid region")

    offset = parse_offset(request.args.get('offset'))
    limit = parse_limit(request.args.get('limit'))

    page = _image_service().list_images(region, offset, limit)
    return jsonify(page.to_dict()), 200


# Files

def _serve_region_file(kind: str, region: str, filename: str):
    # Only the first segment after the region names the file.
    filename = filename.split('/', 1)[0]

    region = region.lower()
    validate_path_segment("region", region)
    validate_path_segment("filename", filename)
    if not _region_service().is_allowed(region):
        raise ForbiddenError("region", "Forbidden")

    directory, name = _image_service().resolve_file(kind, region, filename)
    return send_from_directory(directory, name)


@main_bp.route('/images/<region>/<path:filename>')
def serve_image(region, filename):
    return _serve_region_file("images", region, filename)


@main_bp.route('/thumbs/<region>/<path:filename>')
def serve_thumb(region, filename):
    return _serve_region_file("thumbs", region, filename)


@main_bp.route('/images/')
@main_bp.route('/images/<region>')
@main_bp.route('/images/<region>/')
@main_bp.route('/thumbs/')
@main_bp.route('/thumbs/<region>')
@main_bp.route('/thumbs/<region>/')
def invalid_file_path(region=None):
    raise BadRequestError("Invalid path")


# Website

@main_bp.route('/')
@main_bp.route('/<path:path>')
def index(path=None):
    site_index = os.path.abspath(current_app.config['SITE_INDEX'])
    if not os.path.isfile(site_index):
        logger.error(f"Site entry file missing: {site_index}")
        raise NotFoundError("Not found")
    return send_file(site_index)
