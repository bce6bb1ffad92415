"""Settings, styles and stored credentials kept in the configuration directory."""