# utils - config, logging and corpus reading helpers
