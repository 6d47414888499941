from .routes.resources import endpoints_for


def _endpoints(store):
    return endpoints_for(store.key, store)


def register_filters(app):
    app.jinja_env.filters["endpoints"] = _endpoints
