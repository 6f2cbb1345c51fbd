"""
Blog
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the blog package.
"""

from blog import create_app

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    app.run(debug=app.config['LIVE_RELOAD'], host='0.0.0.0', port=3000)
