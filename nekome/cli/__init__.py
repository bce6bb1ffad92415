"""Small sub-command framework with flag parsing, validation and help text."""