"""Action protocol and the Outcome/Unit value model."""
