"""Flask blueprints with the HTTP handlers for posts and comments."""