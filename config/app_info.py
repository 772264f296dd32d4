APP_NAME = "iPrompt"
APP_VERSION = "0.1.0"
