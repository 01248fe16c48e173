import os
from dotenv import load_dotenv

load_dotenv()


def _split_csv(raw: str):
    return [item.strip() for item in raw.split(',') if item.strip()]


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')
    DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'

    # Contract enforcement
    # warn: undeclared keys are dropped and logged; strict: they are violations.
    # The registry reads these from the environment when contracts register,
    # so they must be set before api.contracts is imported. create_app logs
    # the mode and warns about strict names that match no contract.
    CONTRACT_MODE = os.getenv('CONTRACT_MODE', 'warn').lower()
    CONTRACT_STRICT_CONTRACTS = _split_csv(os.getenv('CONTRACT_STRICT_CONTRACTS', ''))

    # Comma-separated origins allowed on /api/*, "*" for any
    CORS_ORIGINS = _split_csv(os.getenv('CORS_ORIGINS', '*')) or ['*']

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Request logging (read again by the middleware at setup time)
    REQUEST_LOG_ENABLED = os.getenv('REQUEST_LOG_ENABLED', 'true').lower() == 'true'
    REQUEST_LOG_SAMPLE_RATE = os.getenv('REQUEST_LOG_SAMPLE_RATE', '0.0')
    REQUEST_LOG_ENDPOINTS = os.getenv('REQUEST_LOG_ENDPOINTS', '')
