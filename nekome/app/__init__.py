"""Tweet layouts, tweet buffering, actions, posting helpers and utilities."""