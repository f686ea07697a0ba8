from flask import Blueprint, request, jsonify, current_app, send_from_directory


main = Blueprint('main', __name__)


def get_store():
    return current_app.extensions['report_store']


def request_fields():
    # The browser form posts multipart data, API callers may send JSON
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


@main.route('/')
def home():
    return {'message': 'Civic Reporter API is working!'}


@main.route('/api/reports', methods=['POST'])
def create_report():
    report = get_store().create(request_fields(), photo=request.files.get('photo'))
    return jsonify(report), 201


@main.route('/api/reports', methods=['GET'])
def get_reports():
    return jsonify(get_store().list()), 200


@main.route('/api/reports/<int:report_id>', methods=['GET'])
def get_report_by_id(report_id):
    return jsonify(get_store().get(report_id)), 200


@main.route('/api/reports/<int:report_id>', methods=['PUT'])
def update_report(report_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    return jsonify(get_store().update(report_id, data)), 200


@main.route('/api/reports/<int:report_id>/status', methods=['PUT'])
def update_report_status(report_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    return jsonify(get_store().update_status(report_id, data.get('status'))), 200


@main.route('/uploads/<path:filename>', methods=['GET'])
def get_photo(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
