"""Small order-taking application wired by the container in integration tests."""
