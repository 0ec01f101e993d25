SERVICE_NAME = "oauth_http"
