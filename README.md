# nekome

Building blocks for a Twitter client that runs in the terminal: a small
sub-command framework, the configuration directory with settings, colour
style and stored accounts, data models for API responses, text layouts for
tweets and profiles, a per-page tweet buffer, and helpers for tweet and user
actions and for posting tweets with images.

It needs Python 3.10 or newer, PyYAML and wcwidth.

## What the package does not do

nekome is a library of parts; it has no program to run and installs no
command. In particular it has:

* no HTTP client for the Twitter API and no OAuth signing or PIN-based
  authorisation. The functions that act on tweets and users take an `api`
  object that you supply (see *Actions and posting* below);
* no interactive terminal screen: no tabs, key bindings, modals or
  stream mode loop. What it offers instead is the text those screens
  display (`nekome.app.layout`) and the state behind them
  (`nekome.app.tweetbuffer`).

## Commands and flags: `nekome.cli`

`Command` is a tree of sub-commands. `execute(args)` walks the arguments to
find the target command by name or shorthand, parses its flags, runs its
validator and then its `run` function.

```python
from nekome.cli.command import Command
from nekome.cli.validate import require_args


def greet(command, flags):
    greeting = "HELLO" if flags.get("shout") else "Hello"
    print(f"{greeting}, {flags.arg(0)}")


root = Command(name="demo", short="demo tool")
root.add_command(
    Command(
        name="greet",
        shorthand="g",
        short="Greet someone",
        validate=require_args(1),
        set_flag=lambda f: f.add_bool("shout", "s", False, "shout the greeting"),
        run=greet,
    )
)

root.execute(["g", "--shout", "cat"])   # HELLO, cat
root.child_names(True)                  # ['greet']
```

* Every command gets `-h`/`--help`. Help is printed, or passed to the root
  command's `help` callback when it has one, when the flag is given or when
  the command has no `run` function. `help_text()` builds it: description,
  usage, shorthand, example, visible sub-commands and flags.
* Hidden commands are left out of `visible_children()`, `child_names()`
  and lookup.
* `FlagSet` supports boolean, string and comma separated string-list flags
  (`add_bool`, `add_string`, `add_string_list`), long and short forms,
  `--name=value`, grouped short flags and `--`. `get`, `changed`, `arg`,
  `args` and `usages` read the result.
* Validators from `nekome.cli.validate`: `no_args()`, `require_args(n)`,
  `range_args(minimum, maximum)`.
* Failures raise `CliError`, e.g. `no argument`, `command not found: hoge`,
  `accepts 2 arg(s), received 1`; flag problems raise its subclass
  `FlagError`.

## Configuration: `nekome.config`

`Config(directory)` holds `cred`, `settings` and `style`. Without a
directory it uses `~/.config/nekome`, creating it if needed
(`config_dir()`); `config_file_names()` lists the entries there.

| File           | Loaded by       | Contents                                      |
|----------------|-----------------|-----------------------------------------------|
| `settings.yml` | `load_settings` | feature, appearance, texts and icon sections  |
| `default.yml`  | `load_style`    | colour style (name from `appearance.style_file`) |
| `.cred`        | `load_cred`     | stored accounts: user name, ID and tokens     |

`load_settings` and `load_style` write the defaults first when their file
is missing; `load_cred` returns `False` when there is no credentials file.
`save_cred`, `save_settings` and `save_all` write the files. Read and write
failures raise `ConfigError`.

In the YAML files keys are the field names without underscores, e.g.
`feature: {loadtweetscount: 25}`. Values left out keep their defaults.
Some defaults of `Settings`:

* `feature.load_tweets_count` 25, `feature.tweet_max_accumulation_num` 250
* `feature.confirm` – Like, Unlike, Retweet, Unretweet, Delete, Follow,
  Unfollow, Block, Unblock, Mute, Unmute, Tweet and Quit, all `True`
* `feature.startup` – `home`, `mention --unfocus`
* `appearance.date_format` `2006/01/02`, `appearance.time_format`
  `15:04:05` (reference-time layouts)

`Style` holds colour tags such as `blue:-:-` and hex colours such as
`#3e4359`; `hex_to_color("#3e4359")` turns the latter into an integer.

`CredentialStore` keeps accounts in order: `get`, `names`, `write`
(replaces an account with the same ID), `delete`. Unknown names raise
`LookupError("user not found: <name>")`.

## API data: `nekome.api`

`nekome.api.models` has dataclasses for API objects (`UserObj`,
`TweetObj`, `PollObj`, `TweetDictionary`, `UserDictionary`, `RateLimit`,
`UploadImageResponse`, the account `User` and its `Token`).
`build_tweet_dictionaries(raw)` and `build_user_dictionaries(raw)` turn a
decoded JSON response into tweets with their authors, polls and referenced
tweets, or users with their pinned tweets. `RateLimit.from_headers` reads
the `x-rate-limit-*` headers.

`nekome.api.errors.raise_for_status(status_code, reason, body, headers)`
raises `ApiError` for a failed response (`http error: …`,
`Rate limit exceeded (Reset time: HH:MM:SS)` or
`server error: <code> <title> | <detail>`); `raise_partial_error(errors)`
raises for the first partial error.

## Display: `nekome.app`

* `layout.Layout(settings, style)` builds styled text: `tweet`,
  `user_info`, `tweet_text` (hashtags and mentions highlighted), `poll`
  (bar graph), `tweet_detail`, `annotation`, `profile`, `user_bio`,
  `user_detail`.
* `tweetbuffer.TweetBuffer(max_size)` keeps tweets newest first and drops
  the oldest beyond `max_size`; `since_id`, `count`, `selected` (resolves
  retweets), `register_pinned`, `update_rate_limit`. `wrap_index`,
  `count_new_tweets` and `calc_reload_interval` (between 5 s and the
  10 s default) go with it.
* `util` has text helpers: `truncate`, `display_rows`, `split_command`
  (spaces, with double-quoted parts kept), `trim_end_newline`, `get_md5`,
  `highlight_id`, `convert_date_string`, `go_layout_to_strftime`,
  summaries and tweet URLs, and `run_editor`.

## Actions and posting

`nekome.app.actions` and `nekome.app.posting` call methods on an `api`
object you provide:

* `perform_tweet_action(api, action, tweet)` with a `TweetAction` calls
  `like`, `unlike`, `retweet`, `unretweet` or `delete_tweet` with the tweet
  ID; `perform_user_action(api, action, tweet)` with a `UserAction` calls
  `follow`, `unfollow`, `block`, `unblock`, `mute` or `unmute` with the
  author's ID. Both return the status label (`Liked`, `Followed`, …) and a
  summary. `confirmation_title(action)` gives the question to ask first.
* `post_tweet(api, text, quote_id, reply_id, images)` trims trailing
  newlines, returns `None` when there is neither text nor images, uploads
  images through `api.upload_image(base64_data)` and then calls
  `api.post_tweet(text, quote_id, reply_id, media_ids)`.
* `validate_images` allows up to four `.jpg`, `.jpeg`, `.png` or `.gif`
  files, and a GIF only on its own; otherwise it raises `PostError`.
* `edit_with_editor(editor, directory)` opens a temporary `.tmp` file in
  the editor and returns what was saved.

## Exit codes

`nekome.exitcodes.ExitCode`: `OK` 0, `ERR_INIT` 1, `ERR_APP` 2,
`ERR_FILE_IO` 3. `exit_with_message` and `error_exit` print and exit.

## Running the tests

Install the `test` extra and run pytest from the project directory.