# petbox

A tiny virtual pet that lives in your terminal. Keep it fed, keep it
entertained, and watch its health, happiness and hunger change every second.

## Installing

```
pip install .
```

## Playing

```
petbox
```

The game takes over the terminal and shows the pet's current state and a
menu:

```
1. Play
2. Feed
3. Exit
```

Press a number key to choose an option; no Enter is needed. Other keys are
ignored.

- **Play** makes the pet happier but hungrier.
- **Feed** lowers its hunger.
- **Exit** ends the game, prints "Game Over!" and leaves the full-screen view.

Once a second the pet's hunger grows a little. When it gets too hungry it
loses happiness and health; when it is sad its health drops; when it is sick
its happiness drops. A pet that is neither hungry nor sad slowly recovers
health. All stats stay between 0 and 100.

Messages such as "is playing!", "is hungry!" or "is sad!" appear in colour
under the status. Each disappears two seconds after it was last raised, so a
warning stays on screen for as long as its condition persists.

## Using the pieces in code

```python
from petbox.tamagotchi import Tamagotchi

pet = Tamagotchi("Tamagotchi")
pet.play()
pet.feed()
pet.tick()
print(pet.happiness, pet.hunger, pet.health)
```

- `petbox.tamagotchi.Tamagotchi` holds the pet's stats and its notifications.
  `play()`, `feed()` and `tick()` apply the game rules;
  `prune_notifications()` drops expired messages; `print_state(console)` and
  `print_notifications(console)` draw them.
- `petbox.notification.Notification` is a keyed, timed message with a
  `NotificationLevel` of `INFO`, `WARNING` or `ERROR`. Adding a notification
  whose key the pet already holds restarts the existing one's timer instead
  of adding a duplicate.
- `petbox.console.Console` writes lines, menus and coloured info, warning and
  error messages to a `blessed` terminal, and `read_input(prompt)` reads a
  trimmed line of input.
- `petbox.cli.handle_key(pet, key)` applies a menu key and returns `True` for
  exit; `petbox.cli.main()` runs the interactive game.
- `petbox.constants` holds the tuning values, menu entries and colours.

## Limitations

The pet is always named "Tamagotchi", and there is no way to save a pet or
load one later: each game starts from fresh stats. The `petbox` command takes
no options beyond `--help`.

## Running the tests

```
pip install .[test]
pytest
```