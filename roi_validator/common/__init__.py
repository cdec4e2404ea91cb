"""Cross-cutting helpers: settings and logging."""
