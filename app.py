# app.py
import logging
import os
from typing import Optional

from flask import Flask, jsonify, request

# Planner & Preset Imports
from uavsar.flight_path.core import FlightPathPlanner
from uavsar.flight_path.data_models import PlannerConfig
from uavsar.flight_path.exceptions import FlightPathError, InvalidParameter
from uavsar.flight_path.validation import parse_drone_profile, validate_drone_profile
from uavsar.drone_types.core import DroneTypeStore

MIN_AREA_POINTS = 3


def create_app(data_dir: Optional[str] = None, config: Optional[PlannerConfig] = None) -> Flask:
    """Builds the HTTP surface. Each request plans from its own body only."""
    app = Flask(__name__)
    planner = FlightPathPlanner(config)
    store = DroneTypeStore(data_dir or os.environ.get('UAVSAR_DATA_DIR'))

    @app.route('/flightpath', methods=['POST'])
    def flightpath():
        body = request.get_json(silent=True)
        if not isinstance(body, dict) or 'coords' not in body or 'drone' not in body:
            return jsonify({'error': 'BadRequest', 'message': 'JSON body with "coords" and "drone" is required.'}), 400

        coords = body['coords']
        # Fewer than 3 points means no area has been drawn yet
        if isinstance(coords, list) and len(coords) < MIN_AREA_POINTS:
            return jsonify({'result': None})

        try:
            result = planner.plan(coords, body['drone'])
        except FlightPathError as e:
            logging.warning(f"No flight path could be generated: {e}")
            return jsonify({'error': type(e).__name__, 'message': str(e)}), 422
        return jsonify(result.to_dict())

    @app.route('/drones', methods=['GET'])
    def list_drones():
        return jsonify([p.to_dict() for p in store.load()])

    @app.route('/drones', methods=['POST'])
    def save_drones():
        body = request.get_json(silent=True)
        if not isinstance(body, list):
            return jsonify({'error': 'BadRequest', 'message': 'A JSON list of drone profiles is required.'}), 400
        try:
            profiles = [validate_drone_profile(parse_drone_profile(entry, planner.config)) for entry in body]
        except InvalidParameter as e:
            return jsonify({'error': type(e).__name__, 'message': str(e)}), 422
        store.save(profiles)
        return jsonify({'success': True, 'count': len(profiles)})

    return app


if __name__ == '__main__':
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    log = logging.getLogger('werkzeug')
    log.setLevel(logging.WARNING)
    create_app().run(debug=True, use_reloader=False)
