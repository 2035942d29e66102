# certgateway/models.py
"""
Tables read by the certificate lookup.

The database belongs to the store backend; this app never creates or alters
these tables in production. The models document the columns the join relies
on and let the tests build the same schema in SQLite.
"""

from .extensions import db


class Cliente(db.Model):
    __tablename__ = "clientes"

    cliente_id = db.Column(db.Integer, primary_key=True)
    nombre = db.Column(db.String(100), nullable=False)
    apellido = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)


class Producto(db.Model):
    __tablename__ = "productos"

    producto_id = db.Column(db.Integer, primary_key=True)
    nombre = db.Column(db.String(200), nullable=False)
    descripcion = db.Column(db.Text)
    tipo_cabello = db.Column(db.String(100))
    color = db.Column(db.String(100))
    longitud = db.Column(db.String(50))
    imagen_url = db.Column(db.String(500))


class Certificado(db.Model):
    __tablename__ = "certificados"

    certificado_id = db.Column(db.Integer, primary_key=True)
    numero_certificado = db.Column(db.String(100), nullable=False, unique=True)
    fecha_emision = db.Column(db.Date, nullable=False)


class Compra(db.Model):
    __tablename__ = "compras"

    compra_id = db.Column(db.Integer, primary_key=True)
    cliente_id = db.Column(db.Integer, db.ForeignKey("clientes.cliente_id"), nullable=False)
    certificado_id = db.Column(db.Integer, db.ForeignKey("certificados.certificado_id"))
    fecha_compra = db.Column(db.Date, nullable=False)
    estado_pago = db.Column(db.String(50), nullable=False)  # pagado, pendiente, ...

    cliente = db.relationship("Cliente", backref="compras")
    certificado = db.relationship("Certificado", backref="compras")


class DetalleCompra(db.Model):
    __tablename__ = "detallescompra"

    detalle_id = db.Column(db.Integer, primary_key=True)
    compra_id = db.Column(db.Integer, db.ForeignKey("compras.compra_id"), nullable=False)
    producto_id = db.Column(db.Integer, db.ForeignKey("productos.producto_id"), nullable=False)

    compra = db.relationship("Compra", backref="detalles")
    producto = db.relationship("Producto")
