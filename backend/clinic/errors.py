from flask import jsonify
from clinic.domain.invariants.exceptions import (
    BlockStoreError,
    InvariantViolation,
    ValidationError,
)

def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        response = jsonify({
            "error": "ValidationError",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(BlockStoreError)
    def handle_block_store_error(error):
        app.logger.error("Block store failure: %s", error)
        response = jsonify({
            "error": "BlockStoreError",
            "message": str(error)
        })
        response.status_code = 500
        return response
