import abc


class Table(abc.ABC):
    """
    Абстрактний продукт "Стіл".
    Усі вариації столів повинні реалізовувати цей інтерфейс.
    """

    variation: str = ""

    @abc.abstractmethod
    def useful_function_a(self) -> str:
        """
        Абстрактний метод, що повертає опис роботи стола.
        """
        pass


class Sofa(abc.ABC):
    """
    Абстрактний продукт "Диван".
    Диван може працювати самостійно, а також взаємодіяти зі столом.
    Коректна взаємодія можлива лише між продуктами однієї вариації.
    """

    variation: str = ""

    @abc.abstractmethod
    def useful_function_b(self) -> str:
        """
        Абстрактний метод, що повертає опис роботи дивана.
        """
        pass

    @abc.abstractmethod
    def another_useful_function_b(self, collaborator: Table) -> str:
        """
        Абстрактний метод для взаємодії з будь-яким столом.

        Args:
            collaborator (Table): Стіл, з яким взаємодіє диван. Приймається будь-яка вариація.

        Returns:
            str: Опис взаємодії, що містить результат роботи стола.
        """
        pass


class FurnitureFactory(abc.ABC):
    """
    Абстрактна фабрика меблів.
    Оголошує методи створення кожного продукту сімейства. Конкретна фабрика
    створює продукти лише однієї вариації, тому вони сумісні між собою.
    """

    variation: str = ""

    @abc.abstractmethod
    def create_table(self) -> Table:
        """
        Абстрактний метод для створення стола.
        """
        pass

    @abc.abstractmethod
    def create_sofa(self) -> Sofa:
        """
        Абстрактний метод для створення дивана.
        """
        pass

    def combine_table_sofa(self) -> str:
        """
        Створює стіл і диван цієї фабрики та повертає результат їх взаємодії.
        """
        table = self.create_table()
        sofa = self.create_sofa()
        return sofa.another_useful_function_b(table)
