"""Runtime: REST execution and request builders."""
