"""Note storage service with file attachments."""
