import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///scores.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Log every SQL statement (noisy, debugging only)
    SQLALCHEMY_ECHO = os.environ.get('SQL_ECHO', '0') == '1'
    PORT = int(os.environ.get('PORT', '3939'))
    # Comma separated list; '*' allows any origin
    CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]
    # Upload cap for proof files (bytes)
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_PROOF_BYTES', str(1024 * 1024)))
    # Verifier: callable or "module:attribute" import string
    PROOF_VERIFIER = os.environ.get('PROOF_VERIFIER') or 'scoreproof.services.proofs.verifier:command_verifier'
    # External program for the default verifier, reads proof JSON on stdin
    VERIFIER_COMMAND = os.environ.get('VERIFIER_COMMAND')
    VERIFIER_TIMEOUT_SEC = int(os.environ.get('VERIFIER_TIMEOUT_SEC', '120'))
    # Create tables and seed the score ladder on startup
    AUTO_INIT_DB = os.environ.get('AUTO_INIT_DB', '1') == '1'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
