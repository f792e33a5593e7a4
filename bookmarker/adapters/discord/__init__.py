"""Discord adapter — REST client, signatures and message builders."""
