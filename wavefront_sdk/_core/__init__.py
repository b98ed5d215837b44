"""Internal building blocks: response model, executor, validators."""
