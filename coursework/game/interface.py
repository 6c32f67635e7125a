"""Player-facing input and output for the cave game.

Every line the game says is a ``Message``; an ``Interface`` turns messages
into output and reads the player's commands.  ``ConsoleInterface`` types
text out character by character. It appends what is said during a game,
and the player's in-game commands, to a save file so that the last game can
be shown again.
"""

from __future__ import annotations

import abc
import enum
import re
import sys
import time
from pathlib import Path
from typing import Dict, Iterator, Optional, TextIO, TypeVar, Union


class EndProcess(Exception):
    """The player asked to leave the current mode with ``/exit``."""


class WrongData(Exception):
    """A saved game could not be loaded."""


class Side(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    NONE = "none"

    @property
    def adjective(self) -> str:
        """The word used when the player walks into a room on this side."""
        return _SIDE_ADJECTIVES[self]


_SIDE_ADJECTIVES = {
    Side.RIGHT: "правую",
    Side.LEFT: "левую",
    Side.TOP: "верхнюю",
    Side.BOTTOM: "нижнюю",
    Side.NONE: "",
}


class MenuCommand(enum.Enum):
    ENTER_GOD_MODE = "/enter_god_mode"
    PLAY = "/play"
    READ = "/read"
    LOAD = "/load"
    SHOW = "/show"


class ActCommand(enum.Enum):
    RUN = "run"
    TALK = "talk"


class FightCommand(enum.Enum):
    FIGHT = "fight"
    RUN = "run"
    USE = "use"


class QuestCommand(enum.Enum):
    ACCEPT = "accept"
    REJECT = "reject"


class Message(enum.Enum):
    """Everything the game can say.

    Each member holds a text template and whether it belongs to a game
    record (and so goes to the save file).  Placeholders are filled from
    the keyword arguments given to ``render``.
    """

    INVALID = ("Некорректные данные\n", False)
    INFO = (
        "/Это текстовая игра, о путешествии в пещерах!\n"
        "/Вам предстоит ходить по лабиринту подземелий и сражаться с противниками!\n"
        "/В ходе вашего путешествия, вы будете получать опыт!\n"
        "/Чтобы пройти игру, надо набрать необходимое количество опыта\n"
        "/Если вы умрете - потеряете весь накопленный опыт!\n"
        "/Для ввода команд в меню, перед сообщением нужно поставить символ '/' !\n"
        "/Команды во время игры нужно писать без символа '/' !\n"
        "/Есть особая команда - /exit - используйте ее, чтобы досрочно выйти из режима игры,\n"
        "/или чтобы завершить программу в режиме меню!\n"
        "/Когда вы выходите из режима игры до ее завершения,\n"
        "/ваш прогресс сохраняется и вы можете ее загрузить!\n",
        False,
    )
    HEAD_COMMAND = (
        "/Выберете действие!\n"
        "/ --Играть -- Показать последнюю игру --\n"
        "/ -- Загрузить последнюю игру -- Прочитать правила --\n"
        "/(/play  --  /show  --  /load  --  /read)\n",
        False,
    )
    EXIT_GAME = ("/Вы вышли из режима игры!\n", False)
    GOOD_LOAD = ("/Игра успешно загружена!\n", False)
    BAD_LOAD = (
        "/Не удалось загрузить последнюю игру!\n"
        "/Ее нет, или последняя игра уже пройдена!\n",
        False,
    )
    GOD_MODE = ("/Введите параметр:\n", False)
    START_PROCESS = ("/Вы запустили игру!\n", False)
    END_PROCESS = ("/Вы вышли из игры!\n/До свидания!\n", False)

    START_GAME1 = (
        "Вы начинаете путешествие в странных пещерах!\n"
        "Для начала создадим вашего героя!\n",
        True,
    )
    START_GAME2 = (
        "Теперь вы можете начинать свое путешествие!\n"
        "||-----------------------------||\n"
        "Вы попали в новую комнату!\n",
        True,
    )
    END_GAME = (
        "Там вы видите дверь, ведущую из этого лабиринта!\n"
        "||-----------------------------||\n"
        "Вы закончили игру с {exp} опыта!\n",
        True,
    )
    BASE_ITERATION = (
        "Вы видите кого-то впереди, но не можете разглядеть кто это!\n",
        True,
    )
    GET_NAME = ("Введите имя вашего героя:\n", True)
    GET_ROOM = (
        "Введите, в какую комнату собираетесь пройти:\n"
        "(left, right, top или bottom)\n",
        True,
    )
    NEW_ROOM = ("Вы прошли в {side} комнату!\n", True)

    GET_ITEM_BASE = (
        "Вы уже собирались идти дальше, как вдруг заметили,\n"
        "что гоблин что-то сжимает в руках!!\n"
        "Вы раздвигаете его безжизненные руки, и видите странный артефакт!\n",
        True,
    )
    GET_ITEM_RUN = (
        "Пока гоблин насмехался над вашим страхом, он случайно выронил странный артефакт,\n"
        "который отлетел в вашу сторону!\n",
        True,
    )
    GET_SWORD = (
        "Поднимая этот меч, вы видите как он слегка горит красным светом!\n"
        "Используйте его в одной из следующих драк!\n",
        True,
    )
    GET_STICK = (
        "Беря в руки этот старый посох, покрытый инеем,\n"
        "вы чувствуете холод по всему телу!\n"
        "Используйте его в одной из следующих драк!\n",
        True,
    )
    DEATH = ("Вы умерли! Игра начинается заново!\n", True)
    DRAW = ("Вам не удалось победить, но и вас не удалось убить!\n", True)
    WIN = (
        "Вам удалось победить вашего соперника!\n"
        "Гоблин {name} мертв!\n"
        "Вы получили {exp} опыта!\n",
        True,
    )
    USE_SWORD = (
        "Вы достаете свой меч, и в ваших руках он начинает гореть красным пламенем!\n"
        "Вы получите небольшой бонус к вашему опыту на время драки!\n"
        "Теперь начинаете сражение!\n",
        True,
    )
    USE_STICK_TRUE = (
        "Вы достаете ваш посох и чувствуете, как холод пронизывает комнату!\n"
        "Сегодня удача на вашей стороне!\n"
        "Гоблин настолько испугался холода, что убежал от драки!\n"
        "Вы получили {exp} опыта!\n",
        True,
    )
    USE_STICK_FALSE = (
        "Вы достаете ваш посох и чувствуете, как холод пронизывает комнату!\n"
        "Упс! Этот посох оказался обычной палкой!\n"
        "Придется сражаться как обычно!\n",
        True,
    )
    USE_QUEST = (
        "Вы сражаетесь не только для победы!\n"
        "Вы хотите также доказать визирю, что достаточно сильны!\n"
        "Поэтому перед сражением вы теряете {exp} опыта!\n"
        "Теперь начинаете сражение!\n",
        True,
    )
    PASS_QUEST = (
        "Так как вы победили гоблина,\n"
        "Вы получаете опыт, обещанный визирем!\n"
        "Вы получили {exp} опыта!\n",
        True,
    )

    BOSS_1 = (
        "~~  Хо - хо - хо! ~~\n"
        "~~ Дальше тебе не пройти, если ты недостаточно умен! ~~\n"
        "~~ Буль - буль - буль! ~~\n"
        "~~ Для начала ответь мне, какое у тебя имя? ~~\n"
        "~~ Буль - буль - буль! ~~\n",
        True,
    )
    BOSS_2 = (
        "~~ Мда... Хоть это ты знаешь! ~~\n"
        "~~ Теперь - буль - скажи мне, сколько опыта ты успел набрать?  ~~\n"
        "~~ Ах да! Хо - хо - хо! ~~\n"
        "~~ Ты же не можешь этого знать! ~~\n"
        "~~ Властелин этих подземелий - буль -не дал тебе такую возможность! ~~\n"
        "~~ Хмм - ну ты точно сможешь это подсчитать, если я скажу тебе, ~~\n"
        "~~ сколько - буль -опыта у тебя было сначала! ~~\n"
        "~~ Пять - хо - хо! ~~\n"
        "~~ Ты пришел в эти пещеры таким слабым! ~~\n",
        True,
    )
    BOSS_3 = (
        "~~ О! Правильный ответ! ~~\n"
        "~~ Ого! А ты - буль - неплохо тут устроился! ~~\n"
        "~~ Все - хо - хо - ответь мне на последний вопрос! ~~\n"
        "~~ Как твои дела вообще? Живой или как? ~~\n",
        True,
    )
    BOSS_WEAK = (
        "~~ О! Правильный ответ! ~~\n"
        "~~ Мда... Ты все еще слишком слаб, чтоб отсюда выбраться! ~~\n"
        "~~ Оставлю тебя здесь... смотреть дальше как ты мучаешься ~~\n"
        "Водяной достаточно насладился издевательствами над вами!\n"
        "Вы получили {exp} опыта!\n",
        True,
    )
    BOSS_STRONG = (
        "~~ Ну что - жу - буль - буль! ~~\n"
        "~~ Похоже дела у тебя идут отлично! ~~\n"
        "~~ Хо - хо! Наверное мне лучше оставить тебя в покое! ~~\n"
        "Водяной достаточно насладился издевательствами над вами!\n"
        "Вы получили {exp} опыта!\n",
        True,
    )
    BOSS_WRONG_1 = (
        "~~  Хо - хо - хо! ~~\n"
        "~~  Неправильный ответ! ~~\n"
        "~~ Буль - буль - буль! ~~\n",
        True,
    )
    BOSS_WRONG_2 = (
        "~~ Хо - хо - хо! ~~\n"
        "~~ Насколько же ты слабый в - буль - математике! ~~\n"
        "~~ Старайся лучше! ~~\n",
        True,
    )
    BOSS_WRONG_3 = (
        "~~ Буль - буль - буль! ~~\n"
        "~~ Боюсь что здесь может быть только один правильный ответ! ~~\n"
        "~~ Воспользуйся логикой! ~~\n",
        True,
    )

    FIGHT = (
        "(fight -- чтобы подраться; run -- чтобы убежать; use -- чтобы\n"
        "использовать ваше особое оружие и подраться!)\n",
        True,
    )
    FIGHT_USE = ("(fight -- чтобы подраться; run -- чтобы убежать!)", True)
    RUN = ("Вы бежите от драки!\nВы потеряли 3 опыта!\n", True)
    CHOICE = (
        "Выберете действие:\n"
        "(talk -- чтобы поговорить с ним; run -- чтобы идти дальше)\n",
        True,
    )

    GOBLIN = (
        "Вы встречаете гоблина!\n"
        "Он злобно смотрит в вашу сторону, а потом говорит:\n"
        "<< Моё имя {name}, и я убью тебя, а потом заберу твое золото! >>\n"
        "<< Ведь я могу нанести тебе {damage} урона! >>\n",
        True,
    )
    CITIZEN = (
        "Вам встретился дружелюбный житель подземелий!\n"
        "Его имя {name}!\n"
        "Он говорит вам:\n"
        "$$ Приветствую вас! Наверное тяжело здесь находиться, давайте я вам помогу! $$\n"
        "Он хочет поделится с вами своим опытом!\n"
        "Вы получили {exp} опыта\n",
        True,
    )
    PRISONER = (
        "Вам встретился заблудившийся путешественник!\n"
        "Уже никто не помнит как его зовут!\n"
        "Он говорит вам:\n"
        ":( Прошу помогите! Дайте воды... :(\n"
        ":( А... У вас тоже ее нет! Тогда исполните мою последнюю просьбу... :(\n"
        "Он просит вас отомстить его обидчику!\n"
        "Вы получите {exp} опыта, как только убьете гоблина, стоящего рядом!\n"
        "Его имя {name} !\n"
        "Он может нанести вам {damage} урона!\n",
        True,
    )
    BOSS = (
        "О нет!!!\n"
        "Вы встретили огромного водяного!\n"
        "Как вообще в этих пещерах оказался водяной?\n"
        "Он не выглядит агрессивным, но насмехается над\n"
        "вашими жалкими попытками выбраться из подземелий!\n"
        "Он говорит, что сегодня у него хорошее настроение и\n"
        "он хочет поиграть с вами!\n"
        "Чтобы победить его вам надо правильно отвечать на его вопросы!\n"
        "На этот раз убежать от драки не выйдет...\n"
        "Водяной подползает к вам и говорит:\n",
        True,
    )
    VIZIER = (
        "Вам встретился визирь!\n"
        "Её имя {name}!\n"
        "Она говорит вам:\n"
        "** Приветствую вас, путник! Не хотите ли вы пройти мое испытание? **\n"
        "Вы получите особый артефакт!\n"
        "Как только вы победите любого гоблина, вы получите бонус к опыту!\n"
        "Но на время драки с ним, вы станете немного слабее!\n"
        "(accept -- принять испытание; reject -- отклонить!)\n",
        True,
    )
    FIELD = (
        "Вот путь из комнат, по которому вы двигались в подземелье:\n{line}\n",
        True,
    )

    def __init__(self, template: str, saved: bool) -> None:
        self.template = template
        self.saved = saved

    def render(self, **kwargs: object) -> str:
        """Fill the template; a ``Side`` argument becomes its adjective."""
        values = {
            key: value.adjective if isinstance(value, Side) else value
            for key, value in kwargs.items()
        }
        try:
            return self.template.format(**values)
        except KeyError as missing:
            raise TypeError(f"{self.name} needs the argument {missing}") from None


class Interface(abc.ABC):
    """What the game needs from whoever plays it."""

    @abc.abstractmethod
    def get_command_menu(self) -> MenuCommand:
        """Read a menu command."""

    @abc.abstractmethod
    def get_command_room(self) -> Side:
        """Read the side of the next room."""

    @abc.abstractmethod
    def get_command_act(self) -> ActCommand:
        """Read what to do on meeting someone."""

    @abc.abstractmethod
    def get_command_fight(self) -> FightCommand:
        """Read what to do in a fight."""

    @abc.abstractmethod
    def get_command_quest(self) -> QuestCommand:
        """Read the answer to a quest offer."""

    @abc.abstractmethod
    def get_string(self) -> str:
        """Read one word."""

    @abc.abstractmethod
    def get_int(self) -> int:
        """Read one integer."""

    @abc.abstractmethod
    def show(self, path: Union[str, Path]) -> None:
        """Replay a saved game record."""

    @abc.abstractmethod
    def tell(self, message: Message, **kwargs: object) -> None:
        """Say ``message`` with its placeholders filled from ``kwargs``."""

    @abc.abstractmethod
    def print_field(self, line: str) -> None:
        """Show one line of the map of visited rooms."""


_Choice = TypeVar("_Choice", bound=enum.Enum)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


class ConsoleInterface(Interface):
    """Text console: reads whitespace-separated words, types text slowly.

    Running out of input counts as ``/exit``.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        save_path: Union[str, Path] = "save.txt",
        delay: float = 0.015,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self.save_path = Path(save_path)
        self.delay = delay
        self._words = self._read_words()

    # -- low level ---------------------------------------------------------

    def _read_words(self) -> Iterator[str]:
        for line in iter(self._stdin.readline, ""):
            yield from line.split()

    def _next_word(self) -> str:
        word = next(self._words, None)
        if word is None or word == "/exit":
            raise EndProcess()
        return word

    def _save(self, text: str) -> None:
        with self.save_path.open("a", encoding="utf-8") as record:
            record.write(text + "\n")

    def _type(self, text: str) -> None:
        for char in text:
            if self.delay:
                time.sleep(self.delay)
            self._stdout.write(char)
            self._stdout.flush()

    def _choose(self, choices: Dict[str, _Choice], saved: bool = True) -> _Choice:
        while True:
            word = self._next_word()
            if word in choices:
                if saved:
                    self._save(word)
                return choices[word]
            self.tell(Message.INVALID)

    # -- input ---------------------------------------------------------------

    def get_command_menu(self) -> MenuCommand:
        return self._choose({c.value: c for c in MenuCommand}, saved=False)

    def get_command_room(self) -> Side:
        return self._choose({s.value: s for s in Side if s is not Side.NONE})

    def get_command_act(self) -> ActCommand:
        return self._choose({c.value: c for c in ActCommand})

    def get_command_fight(self) -> FightCommand:
        return self._choose({c.value: c for c in FightCommand})

    def get_command_quest(self) -> QuestCommand:
        return self._choose({c.value: c for c in QuestCommand})

    def get_string(self) -> str:
        word = self._next_word()
        self._save(word)
        return word

    def get_int(self) -> int:
        """Read a word starting with an integer; other words are refused."""
        while True:
            match = _LEADING_INT.match(self._next_word())
            if match:
                number = int(match.group(1))
                if _INT_MIN <= number <= _INT_MAX:
                    return number
            self.tell(Message.INVALID)

    # -- output --------------------------------------------------------------

    def show(self, path: Union[str, Path]) -> None:
        """Print every line of the record at ``path`` with a leading ``/``."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        for line in text.split("\n"):
            self._stdout.write("/" + line + "\n")
        self._stdout.flush()

    def tell(self, message: Message, **kwargs: object) -> None:
        text = message.render(**kwargs)
        if message.saved:
            self._save(text)
        self._type(text)

    def print_field(self, line: str) -> None:
        self.tell(Message.FIELD, line=line)