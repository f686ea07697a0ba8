from app import create_app
import logging
import os

app = create_app()

if __name__ == '__main__':
    debug = os.environ.get('FLASK_DEBUG', 'False').lower() in ['true', '1', 'on']
    logging.getLogger(__name__).info(
        f"Civic Reporter backend running on port {app.config['PORT']} (debug={debug})"
    )
    app.run(debug=debug, host='0.0.0.0', port=app.config['PORT'])
