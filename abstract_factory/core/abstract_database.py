import abc


class Connection(abc.ABC):
    """
    Абстрактний продукт "З'єднання з БД".
    """

    variation: str = ""

    @abc.abstractmethod
    def set_connection(self) -> str:
        pass


class Record(abc.ABC):
    """
    Абстрактний продукт "Запис у БД".
    """

    variation: str = ""

    @abc.abstractmethod
    def add_record(self) -> str:
        pass


class QueryBuilder(abc.ABC):
    """
    Абстрактний продукт "Конструктор запитів".
    """

    variation: str = ""

    @abc.abstractmethod
    def query(self) -> str:
        pass


class DatabaseFactory(abc.ABC):
    """
    Абстрактна фабрика драйвера БД.
    Визначає інтерфейс, який повинні реалізовувати фабрики конкретних СУБД.
    Усі об'єкти однієї фабрики належать до однієї СУБД.
    """

    variation: str = ""

    @abc.abstractmethod
    def db_connection(self) -> Connection:
        """
        Абстрактний метод для створення з'єднання.
        """
        pass

    @abc.abstractmethod
    def db_record(self) -> Record:
        """
        Абстрактний метод для створення запису.
        """
        pass

    @abc.abstractmethod
    def db_query_builder(self) -> QueryBuilder:
        """
        Абстрактний метод для створення конструктора запитів.
        """
        pass
