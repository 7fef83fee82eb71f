# stronghold

A text-mode kingdom management game. You rule a medieval kingdom and keep its
peasants, merchants and nobles fed, housed and content, pay and train an army,
set taxes, borrow from the bank and weather famines, plagues, floods, tornadoes,
economic crises, corruption scandals and revolts. Up to four players can also
share one terminal and take turns on a common map.

## Installing

```
pip install .
```

## Playing

```
stronghold
stronghold --directory saves/
```

`--directory` sets where saves and shared records are kept (the current
directory by default). The main menu offers:

- **New Single Player Game**: name your ruler and manage one kingdom month by month.
- **New Multiplayer Game**: four players take turns on the same terminal, sharing a
  10×10 map of forests (`F`), mountains (`M`), plains (`P`) and rivers (`R`).
- **Load Game**: continue a saved game. A single-player save is preferred over a
  multiplayer one when both are present. Ruler names are not saved, so a loaded
  single-player game asks for the name again.

Closing the input (Ctrl-D) or pressing Ctrl-C leaves the game.

### Running a kingdom

- **Kingdom status**: population, army, treasury, resources and leadership.
- **Army**: recruit, train, feed and pay soldiers. Recruiting costs morale;
  training turns recruits into trained soldiers; feeding at least one ration per
  soldier raises morale and two rations raise it more; paying less than three gold
  per trained soldier lowers morale and raises corruption.
- **Population & resources**: build housing (50 wood and 30 stone for 100 people)
  and gather wood and stone, capped at 500 wood and 300 stone.
- **Taxes**: set a tax rate, clamped between 0 and 0.5.
- **Bank**: one loan at a time, repaid at 120%; a loan raises the tax rate by
  0.02 until it is cleared and applies inflation once. An audit costs 500 gold
  and halves corruption, but only once corruption is above 30%.
- **Process next month**: births, illness and deaths against the food supply,
  class happiness, taxes, army pay, inflation, morale and food spoilage.
- **Save/Load**: write `stronghold_save.txt`, or load the saved game.

In a single-player game a random event strikes every five minutes of play and
is applied before the next menu is shown.

### Multiplayer

On their turn a player can run the same kingdom menus, and also:

- propose or break treaties (non-aggression, defense pact, full alliance),
- propose, list and accept trades of food, wood, stone, iron or gold,
- move an army to an adjacent tile; with more than 50 trained soldiers the tile
  is claimed and becomes a keep (`K`),
- attack another player; the outcome is logged and casualties, morale,
  corruption and gold are applied,
- send messages to other players and read the ones addressed to them.

At the start and end of each turn the player's tiles yield resources: forests
10 wood, mountains 5 stone, rivers 15 food and plains 5 food. Keeps yield nothing.

## What it does not do

- Multiplayer is hot-seat only: there is no network play. "Messages" are lines
  in `chat_history.txt`.
- Accepting a trade only marks it `ACCEPTED`; no resources change hands.
- Treaties are recorded but do not stop attacks.
- Random events do not occur in multiplayer games.

## Files

All files live in the chosen directory:

- `stronghold_save.txt`: the single-player save.
- `multi_save.txt`, `player1_save.txt` … `player4_save.txt`, `map_state.txt`:
  the multiplayer save (the turn, each player's kingdom, and the map).
- `alliances.txt`, `trades.txt`, `battles.txt`, `chat_history.txt`: shared
  records of treaties, trade offers, battles and messages.

## Using it as a library

The rules can be used without the menus:

```python
from stronghold.kingdom import Kingdom, process_month
from stronghold.savegame import save_kingdom, load_kingdom

kingdom = Kingdom.new_game("Aldric")
print(process_month(kingdom))        # returns the monthly report
print(kingdom.status_report())
save_kingdom(kingdom, "stronghold_save.txt")
load_kingdom(Kingdom.new_game("Aldric"), "stronghold_save.txt")
```

Other modules: `stronghold.resources`, `stronghold.society`, `stronghold.army`,
`stronghold.economy`, `stronghold.events`, `stronghold.mapgrid`,
`stronghold.battle`, `stronghold.diplomacy`, `stronghold.chat`,
`stronghold.multiplayer`, `stronghold.menus` and `stronghold.cli`.

## Running the tests

```
pip install .[test]
pytest
```