"""Building blocks of a cave text adventure: console interface, characters and items."""