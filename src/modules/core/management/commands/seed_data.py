from __future__ import annotations

import random
from decimal import Decimal

from decouple import config
from django.core.management.base import BaseCommand
from django.db import transaction

from modules.brands.models import Brand
from modules.categories.models import Category
from modules.products.models import Product
from modules.users.models import Role, User

ROLES = [
    ("Admin", "管理者"),
    ("Salesperson", "販売担当"),
    ("Editor", "編集者"),
    ("Shipper", "配送担当"),
    ("Assistant", "アシスタント"),
]

BRANDS = ["Acer", "Apple", "Canon", "Panasonic", "Sony"]

CATEGORIES = ["カメラ", "パソコン", "スマートフォン", "オーディオ", "周辺機器"]


class Command(BaseCommand):
    help = "Seed database with roles, catalogue data and an administrator."

    @transaction.atomic
    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        roles = self._seed_roles()
        brands = self._seed_named(Brand, BRANDS)
        categories = self._seed_named(Category, CATEGORIES)
        products_created = self._seed_products(brands, categories)
        users_created = self._seed_admin(roles)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"roles={len(roles)}, "
                f"brands={len(brands)}, "
                f"categories={len(categories)}, "
                f"products={products_created}, "
                f"users={users_created}"
            )
        )

    def _seed_roles(self) -> list[Role]:
        self.stdout.write("Creating roles...")
        return [
            Role.objects.get_or_create(name=name, defaults={"description": label})[0]
            for name, label in ROLES
        ]

    def _seed_named(self, model, names: list[str]) -> list:
        self.stdout.write(f"Creating {model._meta.verbose_name_plural}...")
        return [model.objects.get_or_create(name=name)[0] for name in names]

    def _seed_products(self, brands: list[Brand], categories: list[Category]) -> int:
        self.stdout.write("Creating products...")
        created = 0
        for brand in brands:
            for index in range(1, 4):
                price = Decimal(random.randrange(1000, 200000, 100))
                _, was_created = Product.objects.get_or_create(
                    name=f"{brand.name} 商品{index}",
                    defaults={
                        "description": f"{brand.name} のサンプル商品です",
                        "in_stock": random.randint(0, 50),
                        "price": price,
                        "cost": (price * Decimal("0.6")).quantize(Decimal("1")),
                        "discount_price": (price * Decimal("0.9")).quantize(Decimal("1")),
                        "shipping_cost": Decimal(random.choice([0, 500, 800])),
                        "brand": brand,
                        "category": random.choice(categories),
                    },
                )
                created += int(was_created)
        return created

    def _seed_admin(self, roles: list[Role]) -> int:
        email = config("SEED_ADMIN_EMAIL", default="admin@example.com")
        if User.objects.filter(email=email).exists():
            return 0
        admin = User(email=email, name="管理者", enabled=True)
        admin.set_password(config("SEED_ADMIN_PASSWORD", default="admin12345"))
        admin.save()
        admin.roles.set([role for role in roles if role.name == "Admin"])
        return 1
