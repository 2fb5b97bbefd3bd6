"""
VisioNova Backend API Server
Flask application providing AI text detection endpoints.
"""
import logging
import os

from flask import Flask, request, jsonify
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from text_detector import AIContentDetector, RemoteClassifier, ClassifierError, ConfigurationError
from text_detector.config import MAX_TEXT_LENGTH
from text_detector.verdict import score_to_verdict

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)  # Enable CORS for frontend requests

# Initialize rate limiter
limiter = Limiter(
    app=app,
    key_func=get_remote_address,
    default_limits=["100 per hour"],
    storage_uri="memory://"
)

ai_detector = AIContentDetector()
remote_classifier = RemoteClassifier()

# HTTP status per remote failure
REMOTE_ERROR_STATUS = {
    'CONFIG_ERROR': 503,
    'NETWORK_ERROR': 502,
    'API_ERROR': 502,
    'PARSE_ERROR': 502,
}


def error_response(message: str, error_code: str, status: int):
    return jsonify({
        'success': False,
        'error': message,
        'error_code': error_code
    }), status


def read_text_field():
    """
    Pull and validate the "text" field from the JSON body.

    Returns:
        (text, None) on success, (None, error response) otherwise
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or 'text' not in data:
        return None, error_response('Missing "text" field in request body', 'MISSING_TEXT', 400)

    text = data['text']

    if not isinstance(text, str):
        return None, error_response('"text" must be a string', 'INVALID_INPUT', 400)

    if len(text) > MAX_TEXT_LENGTH:
        return None, error_response(
            f'Input too long (max {MAX_TEXT_LENGTH:,} characters)', 'INVALID_INPUT', 400
        )

    return text, None


@app.route('/')
@app.route('/api/health')
def health_check():
    """Health check endpoint."""
    return jsonify({
        'status': 'ok',
        'service': 'VisioNova Text Detection API',
        'version': '1.0.0',
        'endpoints': {
            'analyze': '/api/analyze (POST)',
            'analyze_remote': '/api/analyze/remote (POST)'
        }
    })


@app.route('/api/analyze', methods=['POST'])
@limiter.limit("30 per minute")
def analyze_text():
    """
    Score text with the local heuristic detector.

    Request body:
        {
            "text": "The text to analyze"
        }

    Response:
        {
            "success": true,
            "ai_percentage": 0-100,
            "human_percentage": 0-100,
            "verdict": "AI Generated|Human Written|Uncertain",
            "scores": {...},
            "detected_phrases": [...],
            "metrics": {...},
            "mode": "local"
        }
    """
    try:
        text, error = read_text_field()
        if error:
            return error

        result = ai_detector.predict(text)
        result['success'] = True
        return jsonify(result)

    except Exception as e:
        logger.exception("Local analysis failed")
        return error_response(f'Internal server error: {str(e)}', 'INTERNAL_ERROR', 500)


@app.route('/api/analyze/remote', methods=['POST'])
@limiter.limit("10 per minute")
async def analyze_text_remote():
    """
    Score text with the hosted classifier.

    Request body:
        {
            "text": "The text to analyze",
            "fallback": true/false (optional, default false; must be a JSON boolean)
        }

    With fallback=true a remote failure returns the local result instead,
    with "fallback_reason" set.
    """
    try:
        text, error = read_text_field()
        if error:
            return error

        # only a JSON true enables it; "false" or 1 do not
        fallback = request.get_json(silent=True).get('fallback') is True

        try:
            ai_percentage = await remote_classifier.analyze_remote(text)
        except ClassifierError as e:
            if fallback:
                log = logger.info if isinstance(e, ConfigurationError) else logger.warning
                log(f"Remote path unavailable, using local detector: {e}")
                result = ai_detector.predict(text)
                result['fallback_reason'] = str(e)
                result['success'] = True
                return jsonify(result)
            return error_response(str(e), e.error_code, REMOTE_ERROR_STATUS.get(e.error_code, 502))

        return jsonify({
            'success': True,
            'ai_percentage': round(ai_percentage, 2),
            'human_percentage': round(100.0 - ai_percentage, 2),
            'verdict': score_to_verdict(ai_percentage),
            'mode': 'remote'
        })

    except Exception as e:
        logger.exception("Remote analysis failed")
        return error_response(f'Internal server error: {str(e)}', 'INTERNAL_ERROR', 500)


if __name__ == '__main__':
    port = int(os.getenv('PORT', '5000'))
    logger.info(f"Starting VisioNova Text Detection API on http://localhost:{port}")
    app.run(debug=False, host='0.0.0.0', port=port)
